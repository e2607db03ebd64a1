"""Tests for the text part cache."""

from genai_content.core.cache import Cache
from genai_content.core.parser import parse_content


class TestCache:
    """Tests for Cache."""

    def test_get_or_create_miss(self):
        """Test that a miss creates a part reusing the given wire object."""
        cache = Cache()
        wire = {"text": "hello"}
        part = cache.get_or_create("hello", wire)
        assert part.text == "hello"
        assert part.to_json() is wire
        assert "hello" in cache
        assert len(cache) == 1

    def test_get_or_create_hit(self):
        """Test that a hit returns the first instance and ignores the new wire object."""
        cache = Cache()
        first_wire = {"text": "hello"}
        first = cache.get_or_create("hello", first_wire)
        second = cache.get_or_create("hello", {"text": "hello", "extra": True})
        assert second is first
        assert second.to_json() is first_wire
        assert len(cache) == 1

    def test_distinct_texts(self):
        """Test that distinct texts get distinct entries."""
        cache = Cache()
        a = cache.get_or_create("a", {"text": "a"})
        b = cache.get_or_create("b", {"text": "b"})
        assert a is not b
        assert len(cache) == 2
        assert "c" not in cache

    def test_identity_across_parses(self):
        """Test that one cache shares text parts across separate parses."""
        cache = Cache()
        hello = {"text": "hello"}
        first = parse_content({"role": "user", "parts": [hello]}, cache)
        second = parse_content({"role": "model", "parts": [{"text": "other"}, {"text": "hello"}]}, cache)
        assert first.to_json()["parts"][0] is hello
        assert first.parts[0] is second.parts[1]
        assert second.to_json()["parts"][1] is first.to_json()["parts"][0]
        assert first.to_json() == {"role": "user", "parts": [{"text": "hello"}]}
        assert second.to_json() == {"role": "model", "parts": [{"text": "other"}, {"text": "hello"}]}

    def test_repeated_text_within_one_content(self):
        """Test that repeated text within one content is shared."""
        content = parse_content({"parts": [{"text": "x"}, {"text": "x"}]}, Cache())
        assert content.parts[0] is content.parts[1]

    def test_isolation_between_caches(self):
        """Test that two caches never share instances."""
        value = {"parts": [{"text": "hello"}]}
        first = parse_content(value, Cache())
        second = parse_content(value, Cache())
        assert first.parts[0] is not second.parts[0]
        assert first.parts[0] == second.parts[0]
