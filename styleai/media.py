"""Data URI photos: parse, check and shrink them before they go to Gemini."""

import base64
import binascii
import io
import re
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from styleai.config import ALLOWED_IMAGE_TYPES, MAX_DIMENSION, MAX_PHOTO_BYTES

_DATA_URI_RE = re.compile(
    r"^data:(?P<mime_type>[\w.+-]+/[\w.+-]+)(?P<params>(?:;[\w.+-]+=[^;,]*)*);base64,(?P<payload>.*)$",
    re.DOTALL,
)

# Camera JPEGs with embedded previews open as MPO.
_FORMAT_MIME_TYPES = {"MPO": "image/jpeg"}


@dataclass(frozen=True)
class DataUri:
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def to_uri(self) -> str:
        return f"data:{self.mime_type};base64,{base64.b64encode(self.data).decode('ascii')}"


def parse_data_uri(value: str) -> DataUri:
    """Decode a `data:<mime>;base64,<payload>` photo, raising ValueError if it is unusable."""
    match = _DATA_URI_RE.match(value.strip())
    if match is None:
        raise ValueError("Photo must be a data URI of the form 'data:<mimetype>;base64,<encoded_data>'")

    mime_type = match.group("mime_type").lower()
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise ValueError(f"Unsupported image type: {mime_type}. Must be one of {ALLOWED_IMAGE_TYPES}")

    payload = re.sub(r"\s+", "", match.group("payload"))
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e

    if not data:
        raise ValueError("Photo is empty")
    if len(data) > MAX_PHOTO_BYTES:
        raise ValueError(f"Photo is too large ({len(data)} bytes). Must be smaller than {MAX_PHOTO_BYTES // (1024 * 1024)}MB")

    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
        # verify() skips pixel data for some formats; a full decode catches truncation.
        with Image.open(io.BytesIO(data)) as img:
            img.load()
    except (Image.DecompressionBombError, UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise ValueError("Photo data is not a readable image") from e

    detected = _FORMAT_MIME_TYPES.get(image_format, Image.MIME.get(image_format or ""))
    if detected != mime_type:
        raise ValueError(f"Photo content ({detected or 'unknown'}) does not match its declared type {mime_type}")

    return DataUri(mime_type=mime_type, data=data)


def prepare_for_upload(photo: DataUri) -> DataUri:
    """Resize so the longest side is MAX_DIMENSION. Small images pass through untouched."""
    with Image.open(io.BytesIO(photo.data)) as img:
        if max(img.size) <= MAX_DIMENSION:
            return photo

        rgb = img.convert("RGB")
    rgb.thumbnail((MAX_DIMENSION, MAX_DIMENSION), Image.LANCZOS)
    buf = io.BytesIO()
    rgb.save(buf, format="JPEG", quality=85)
    return DataUri(mime_type="image/jpeg", data=buf.getvalue())
