"""Identity cache for parsed parts."""

from collections.abc import Mapping
from logging import getLogger
from typing import Any
from .base.part import TextPart

logger = getLogger(__name__)


class Cache:
    """
    Cache used to avoid repeatedly creating the same content and JSON objects.

    Requests contain the entire history, which means parsing the same JSON objects
    over and over. The cache recognizes repeated text and hands back the part built
    the first time it was seen. Entries are never evicted, so scope one cache to one
    conversation and drop it with its owner. Not thread-safe.
    """

    def __init__(self) -> None:
        self._text_cache: dict[str, TextPart] = {}

    def get_or_create(self, text: str, json: Mapping[str, Any]) -> TextPart:
        """
        Return the TextPart cached for `text`, creating it from `json` on first sight.

        Args:
            text (str): The raw text, used as the cache key.
            json (Mapping[str, Any]): The decoded wire object the text came from. Ignored on a hit;
                on a miss it becomes the part's wire representation as-is.

        Returns:
            TextPart: The (possibly shared) part for this text.
        """
        part = self._text_cache.get(text)
        if part is None:
            part = TextPart.from_wire_json(text, json)
            self._text_cache[text] = part
            logger.debug(f"Text part cache miss, {len(self._text_cache)} entries cached")
        else:
            logger.debug("Text part cache hit")
        return part

    def __len__(self) -> int:
        return len(self._text_cache)

    def __contains__(self, text: object) -> bool:
        return text in self._text_cache
