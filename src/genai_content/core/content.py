"""Multi-part content turns."""

from collections.abc import Iterable, Mapping
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from typing import Any, Self, assert_never
from .base.part import Part, TextPart, DataPart
from .base.role import ContentRole


class Content(BaseModel):
    """
    The base structured datatype containing the multi-part content of a message.

    The wire representation is built once from `role` and `parts` when the turn is created,
    and `to_json` returns it without recomputation.

    Attributes:
        role (str | None): The producer of the content, usually 'user' or 'model'. Not validated;
            can be left unset for single-turn requests.
        parts (tuple[Part, ...]): Ordered parts that constitute a single message. Parts may have different MIME types.
    """
    model_config = ConfigDict(frozen=True)

    role: str | None = Field(default=None, description="The producer of the content.")
    parts: tuple[Part, ...] = Field(default=(), description="The ordered parts of the content.")

    _json: dict[str, Any] = PrivateAttr(default_factory=dict)

    def model_post_init(self, context: Any, /) -> None:
        json: dict[str, Any] = {}
        if self.role is not None:
            json["role"] = self.role
        json["parts"] = [part.to_json() for part in self.parts]
        self._json = json

    @classmethod
    def text(cls, text: str) -> "Content":
        """
        Create a user turn holding a single text part.

        Args:
            text (str): The text of the message.

        Returns:
            Content: A 'user' content with one TextPart.
        """
        return cls(role=ContentRole.USER.value, parts=(TextPart(text=text),))

    @classmethod
    def data(cls, mime_type: str, bytes: bytes) -> "Content":
        """
        Create a user turn holding a single inline data part.

        Args:
            mime_type (str): The MIME type of the data.
            bytes (bytes): The raw payload.

        Returns:
            Content: A 'user' content with one DataPart.
        """
        return cls(role=ContentRole.USER.value, parts=(DataPart(mime_type=mime_type, bytes=bytes),))

    @classmethod
    def multi(cls, parts: Iterable[Part]) -> "Content":
        """Create a user turn from arbitrary ordered parts."""
        return cls(role=ContentRole.USER.value, parts=tuple(parts))

    @classmethod
    def model(cls, parts: Iterable[Part]) -> "Content":
        """Create a model turn from arbitrary ordered parts."""
        return cls(role=ContentRole.MODEL.value, parts=tuple(parts))

    @property
    def plain_text(self) -> str:
        """
        The text of all text parts, concatenated in order. Data parts contribute nothing.

        Returns:
            str: The concatenated text, empty if the turn holds no text part.
        """
        chunks: list[str] = []
        for part in self.parts:
            match part:
                case TextPart():
                    chunks.append(part.text)
                case DataPart():
                    continue
                case _:
                    assert_never(part)
        return "".join(chunks)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """
        Returns a copy of the content; an `update` rebuilds the wire representation from the new fields.

        Args:
            update (Mapping[str, Any] | None): Field values to change in the copy.
            deep (bool): Whether to deep-copy the fields.

        Returns:
            Self: The copied content.
        """
        copied = super().model_copy(deep=deep)
        if not update:
            return copied
        return type(self)(**{**copied.__dict__, **update})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self.role == other.role and self.parts == other.parts

    def __hash__(self) -> int:
        return hash((self.role, self.parts))

    def to_json(self) -> dict[str, Any]:
        """
        Returns the cached wire representation of the content.

        Returns:
            dict[str, Any]: `{"role": ..., "parts": [...]}`, without the 'role' key when role is None.
        """
        return self._json

    def __str__(self) -> str:
        """
        Returns a string representation of the Content.

        Returns:
            str: A string description of the object's attributes.
        """
        return f"Content(role={self.role}, parts={list(self.parts)})"

    def __repr__(self) -> str:
        """
        Returns a formal string representation of the Content.

        Returns:
            str: A string representation suitable for debugging.
        """
        return self.__str__()
