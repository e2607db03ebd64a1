from enum import Enum

class ContentRole(str, Enum):
    """
    Enumeration representing the conventional producers of a content turn.

    Note: `Content.role` accepts any string; these values are the ones the API understands.

    Attributes:
        USER (str): Represents a turn written by the user.
        MODEL (str): Represents a turn produced by the model.
    """
    USER = "user"
    MODEL = "model"
