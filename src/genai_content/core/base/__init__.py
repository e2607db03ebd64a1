from .modality import Modality
from .role import ContentRole
from .part import BasePart, TextPart, DataPart, Part

__all__ = ["Modality", "ContentRole", "BasePart", "TextPart", "DataPart", "Part"]
