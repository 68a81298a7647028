import base64
import binascii
import hashlib
import logging
import os

from typing import Optional

from diffusion_to.errors import ImageDecodeError, InvalidImageData
from diffusion_to.models.image import DiffusionImage

logger = logging.getLogger("diffusion_to")

def decode_raw_image(raw: str) -> bytes:
    """
    Decode the ``raw`` field of a finished image, a data URI such as
    ``data:image/png;base64,<data>``. Only the text after the last comma
    is decoded.
    """

    if "," not in raw:
        raise InvalidImageData()

    contents = raw.rsplit(",", 1)[1]

    try:
        return base64.b64decode(contents, validate=True)
    except binascii.Error as e:
        raise ImageDecodeError(f"invalid base64 image data: {e}") from e

def default_filename(binary: bytes) -> str:
    return hashlib.sha256(binary).hexdigest() + ".png"

def save_image(
    image: DiffusionImage,
    filename: Optional[str] = None,
    directory: Optional[str] = None,
) -> str:
    # A payload that fails to decode must leave no file behind.

    binary = decode_raw_image(image.raw)

    if not filename:
        filename = default_filename(binary)

    if directory:
        filename = os.path.join(directory, filename)

    with open(filename, "wb") as fp:
        fp.write(binary)

    logger.info(f"Saved image_id={image.id} to filename={filename} ({len(binary)} bytes)")

    return filename
