import io
import base64
import binascii
from typing import Tuple, Optional
from PIL import Image


def encode_data_url(image_bytes: bytes, media_type: str) -> str:
    """
    Encode raw image bytes as a self-describing data URL
    """
    payload = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{media_type};base64,{payload}"


def decode_data_url(data_url: str) -> Tuple[Optional[str], bytes]:
    """
    Split a data URL into its media type and decoded bytes

    Args:
        data_url: String like "data:image/png;base64,iVBOR..."

    Returns:
        (media_type, image_bytes); media_type is None when there is no header

    Raises:
        ValueError: If the payload is not valid base64
    """
    media_type = None
    payload = data_url
    # Remove header if present
    if "," in data_url:
        header, payload = data_url.split(",", 1)
        if header.startswith("data:"):
            media_type = header[len("data:"):].split(";")[0] or None

    try:
        return media_type, base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


def describe_photo(data_url: Optional[str]) -> str:
    """
    Short human-readable summary of a stored photo, e.g. "PNG 120x80"
    """
    if not data_url:
        return "no photo"

    try:
        _, image_bytes = decode_data_url(data_url)
        with Image.open(io.BytesIO(image_bytes)) as image:
            width, height = image.size
            return f"{image.format} {width}x{height}"
    except (ValueError, OSError):
        return "unreadable image"
