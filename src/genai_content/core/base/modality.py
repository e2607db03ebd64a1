from enum import Enum

class Modality(Enum):
    """
    Enumeration representing the kinds of media a content part can carry.

    Attributes:
        TEXT (str): Represents a plain text part.
        DATA (str): Represents an inline binary data part (image, audio, document...).
    """
    TEXT = "text"
    DATA = "data"
