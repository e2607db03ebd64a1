"""Parsing of decoded wire JSON into content objects."""

from logging import getLogger
from typing import Any
from genai_content.exceptions import FormatError
from .base.part import Part
from .cache import Cache
from .content import Content

logger = getLogger(__name__)


def parse_content(json_object: Any, cache: Cache) -> Content:
    """
    Parse a decoded JSON value into a Content.

    Args:
        json_object (Any): A mapping with a 'parts' list and an optional string 'role'.
        cache (Cache): The cache consulted for text parts.

    Returns:
        Content: The parsed content, parts in input order.

    Raises:
        FormatError: If the value is not a recognized content shape, or one of its parts is not.
        NotImplementedError: If one of the parts is inline data.
    """
    match json_object:
        case {"parts": list() | tuple() as raw_parts}:
            role = json_object.get("role")
            if not isinstance(role, str):
                role = None
            parts = [parse_part(raw_part, cache) for raw_part in raw_parts]
            logger.debug(f"Parsed content with role={role} and {len(parts)} parts")
            return Content(role=role, parts=tuple(parts))
        case _:
            raise FormatError("Unhandled Content format", json_object)


def parse_part(json_object: Any, cache: Cache) -> Part:
    """
    Parse a decoded JSON value into a Part.

    Args:
        json_object (Any): A `{"text": ...}` or `{"inlineData": {...}}` mapping.
        cache (Cache): The cache consulted for text parts.

    Returns:
        Part: The parsed part; text parts may be shared with earlier parses through the cache.

    Raises:
        FormatError: If the value is not a recognized part shape.
        NotImplementedError: If the value is an inline data part.
    """
    match json_object:
        case {"text": str() as text}:
            return cache.get_or_create(text, json_object)
        case {"inlineData": {"mimeType": str(), "data": str()}}:
            raise NotImplementedError("inlineData content part not yet supported")
        case _:
            raise FormatError("Unhandled Part format", json_object)
