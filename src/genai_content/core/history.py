"""Conversation history sharing one parse cache."""

from collections.abc import Iterable, Iterator
from logging import getLogger
from typing import Any, assert_never
from genai_content.exceptions import FormatError
from .base.modality import Modality
from .base.part import TextPart, DataPart
from .cache import Cache
from .content import Content
from .parser import parse_content

logger = getLogger(__name__)


class ChatHistory:
    """
    An ordered, append-only list of content turns.

    The whole history is re-sent with every request, so the history owns a single
    `Cache` for its lifetime: text parts seen again while parsing incoming turns are
    reused instead of rebuilt.

    Attributes:
        contents (list[Content]): The turns, oldest first.
    """

    def __init__(self, contents: Iterable[Content] = ()) -> None:
        """
        Initializes the ChatHistory.

        Args:
            contents (Iterable[Content]): Initial turns, oldest first.
        """
        self.contents: list[Content] = list(contents)
        self._cache = Cache()

    @classmethod
    def from_json(cls, values: Any) -> "ChatHistory":
        """
        Create a history from a decoded JSON list of turns.

        Args:
            values (Any): A list of wire-format content objects.

        Returns:
            ChatHistory: A history whose turns were parsed with its own cache.

        Raises:
            FormatError: If `values` is not a list, or one of the turns is malformed.
        """
        if not isinstance(values, (list, tuple)):
            raise FormatError("Unhandled history format", values)
        history = cls()
        for value in values:
            history.add_json(value)
        logger.info(f"Loaded history with {len(history)} turns and {len(history.cache)} distinct texts")
        return history

    @property
    def cache(self) -> Cache:
        """The cache shared by every parse into this history."""
        return self._cache

    def append(self, content: Content) -> None:
        self.contents.append(content)

    def extend(self, contents: Iterable[Content]) -> None:
        self.contents.extend(contents)

    def add_json(self, value: Any) -> Content:
        """
        Parse an incoming turn with the history's cache and append it.

        Args:
            value (Any): A wire-format content object.

        Returns:
            Content: The parsed turn.
        """
        content = parse_content(value, self._cache)
        self.contents.append(content)
        return content

    def to_json(self) -> list[dict[str, Any]]:
        """
        Returns the wire representation of the whole history.

        Returns:
            list[dict[str, Any]]: The cached representation of each turn, oldest first.
        """
        return [content.to_json() for content in self.contents]

    def count_parts(self) -> dict[Modality, int]:
        """
        Count the parts of every turn by modality.

        Returns:
            dict[Modality, int]: The number of parts per modality, zero included.
        """
        counts = {modality: 0 for modality in Modality}
        for content in self.contents:
            for part in content.parts:
                match part:
                    case TextPart():
                        counts[Modality.TEXT] += 1
                    case DataPart():
                        counts[Modality.DATA] += 1
                    case _:
                        assert_never(part)
        return counts

    def __len__(self) -> int:
        return len(self.contents)

    def __iter__(self) -> Iterator[Content]:
        return iter(self.contents)

    def __getitem__(self, index: int) -> Content:
        return self.contents[index]
