import filetype as ft
import base64

def get_mime_type(data: str | bytes) -> str | None:
    """
    Guess the MIME type of a payload from its leading magic bytes.

    Args:
        data (str | bytes): The raw payload, or the payload as a standard base64 string (as found in 'inlineData.data').

    Returns:
        str | None: The detected MIME type (e.g., 'image/png'), or None when the format is not recognized.

    Raises:
        binascii.Error: If `data` is a string that is not valid base64.
    """
    payload = base64.b64decode(data, validate=True) if isinstance(data, str) else data
    return ft.guess_mime(payload)
