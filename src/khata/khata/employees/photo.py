from __future__ import annotations

import base64
import binascii
import io
import re

from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ValidationError

_DATA_URL = re.compile(r"^data:(image/[\w.+-]+);base64,(.*)$", re.DOTALL)


def validate_photo(photo: str | None, *, max_bytes: int) -> str | None:
    """Check an uploaded photo (base64 data URL) before it is stored.

    Returns the photo unchanged, or None for an empty upload.
    """
    if not photo:
        return None

    match = _DATA_URL.match(photo.strip())
    if not match:
        raise ValidationError("Photo must be an image data URL")

    try:
        raw = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Photo is not valid base64 data")

    if len(raw) > max_bytes:
        raise ValidationError(f"Photo must be {max_bytes // 1024} KB or smaller")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("Photo is not a readable image")

    return photo.strip()
