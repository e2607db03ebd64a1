from abc import abstractmethod
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from collections.abc import Mapping
from typing import Any, Literal, Self
from genai_content.core.base.modality import Modality
from genai_content.utilities.mime_type import get_mime_type
import base64

# Validation-context key carrying an already wire-shaped value for a part to adopt as-is.
WIRE_JSON_CONTEXT_KEY = "wire_json"

class BasePart(BaseModel):
    """
    Base class for the media units of a `Content` turn.

    A part is immutable. Its wire representation is computed once, right after validation,
    and `to_json` hands back that same object on every call.
    """
    model_config = ConfigDict(frozen=True)

    _json: dict[str, Any] = PrivateAttr(default_factory=dict)

    def model_post_init(self, context: Any, /) -> None:
        if isinstance(context, dict) and context.get(WIRE_JSON_CONTEXT_KEY) is not None:
            self._json = context[WIRE_JSON_CONTEXT_KEY]
        else:
            self._json = self._build_json()

    @abstractmethod
    def _build_json(self) -> dict[str, Any]:
        """
        Build the wire representation of the part from its fields.

        Returns:
            dict[str, Any]: The JSON-compatible representation.
        """
        pass

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """
        Returns a copy of the part; an `update` rebuilds the wire representation from the new fields.

        Args:
            update (Mapping[str, Any] | None): Field values to change in the copy.
            deep (bool): Whether to deep-copy the fields.

        Returns:
            Self: The copied part.
        """
        copied = super().model_copy(deep=deep)
        if not update:
            return copied
        return type(self)(**{**copied.__dict__, **update})

    def __eq__(self, other: object) -> bool:
        # Fields only; a part adopted from the wire may carry extra keys in its JSON.
        if not isinstance(other, BasePart):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self), *self.__dict__.values()))

    def to_json(self) -> dict[str, Any]:
        """
        Returns the cached wire representation of the part.

        Returns:
            dict[str, Any]: The JSON-compatible representation. Must not be mutated by callers.
        """
        return self._json

class TextPart(BasePart):
    """
    Represents a text part of a content turn.

    Attributes:
        modality (Literal[Modality.TEXT]): The modality type, always 'text'.
        text (str): The text of the part.
    """
    modality: Literal[Modality.TEXT] = Modality.TEXT
    text: str = Field(description="The text of the part.")

    @classmethod
    def from_wire_json(cls, text: str, json: dict[str, Any]) -> "TextPart":
        """
        Create a TextPart that adopts an existing wire object instead of building a new one.

        Args:
            text (str): The text of the part.
            json (dict[str, Any]): The already-decoded `{"text": ...}` object to reuse.

        Returns:
            TextPart: A part whose `to_json` returns `json` itself.
        """
        return cls.model_validate({"text": text}, context={WIRE_JSON_CONTEXT_KEY: json})

    def _build_json(self) -> dict[str, Any]:
        return {"text": self.text}

class DataPart(BasePart):
    """
    Represents inline binary data (image, audio, document...) within a content turn.

    Attributes:
        modality (Literal[Modality.DATA]): The modality type, always 'data'.
        mime_type (str): The IANA MIME type of the data, e.g. 'image/png'.
        bytes (bytes): The raw binary payload.
    """
    modality: Literal[Modality.DATA] = Modality.DATA
    mime_type: str = Field(description="The MIME type of the data.")
    bytes: bytes

    @classmethod
    def from_file(cls, file_path: str, mime_type: str | None = None) -> "DataPart":
        """
        Create a DataPart from a local file.

        Args:
            file_path (str): The path to the file.
            mime_type (str | None): The MIME type of the file. Detected from the file contents when None.

        Returns:
            DataPart: An instance holding the file contents.

        Raises:
            ValueError: If no MIME type is given and it cannot be detected.
        """
        with open(file_path, "rb") as file:
            data = file.read()
        if mime_type is None:
            mime_type = get_mime_type(data)
            if mime_type is None:
                raise ValueError(f"Could not detect MIME type of file: {file_path}")
        return cls(mime_type=mime_type, bytes=data)

    @classmethod
    def from_base64(cls, mime_type: str, data: str) -> "DataPart":
        """
        Create a DataPart from a base64-encoded string.

        Args:
            mime_type (str): The MIME type of the data.
            data (str): The base64-encoded payload (standard alphabet).

        Returns:
            DataPart: An instance holding the decoded bytes.
        """
        return cls(mime_type=mime_type, bytes=base64.b64decode(data, validate=True))

    def _build_json(self) -> dict[str, Any]:
        return {
            "inlineData": {
                "data": base64.b64encode(self.bytes).decode("ascii"),
                "mimeType": self.mime_type
            }
        }

Part = TextPart | DataPart
