"""
Image Picker

Turns an image chosen in the browser's file picker into an image reference
string that a task can carry.
"""

import io
import os
import uuid
import logging
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, UnidentifiedImageError
from werkzeug.utils import secure_filename

from .errors import InvalidImageError, PermissionDeniedError

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "media/"
DEFAULT_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.gif', '.bmp', '.webp')


class ImagePicker:
    """Store picked images and hand out references to them"""

    def __init__(self, media_dir: str = "data/media",
                 allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        """
        Initialize image picker

        Args:
            media_dir: Directory picked images are stored in
            allowed_extensions: File extensions accepted as images
        """
        self.media_dir = Path(media_dir)
        self.allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)
        self.permission_granted = False

    def request_permission(self) -> bool:
        """
        Check that the media directory can be created, read and written

        Returns:
            True if access is granted
        """
        try:
            self.media_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Permission denied for {self.media_dir}: {e}")
            self.permission_granted = False
            return False

        self.permission_granted = os.access(self.media_dir, os.R_OK | os.W_OK | os.X_OK)
        if self.permission_granted:
            logger.info(f"Media access granted: {self.media_dir}")
        else:
            logger.warning(f"Permission denied for {self.media_dir}")
        return self.permission_granted

    def pick(self, file_storage) -> Optional[str]:
        """
        Store an uploaded image

        Args:
            file_storage: Uploaded file (werkzeug FileStorage) or None

        Returns:
            Image reference, or None if nothing was picked

        Raises:
            PermissionDeniedError: If media access was not granted
            InvalidImageError: If the file is not an accepted image
        """
        if file_storage is None or not file_storage.filename:
            logger.debug("Image pick cancelled")
            return None

        if not self.permission_granted:
            raise PermissionDeniedError("Permission denied")

        filename = secure_filename(file_storage.filename)
        extension = Path(filename).suffix.lower()
        if extension not in self.allowed_extensions:
            raise InvalidImageError(f"Unsupported image type: {file_storage.filename}")

        data = file_storage.read()
        self._verify(data, file_storage.filename)

        stored_name = f"{uuid.uuid4().hex}{extension}"
        (self.media_dir / stored_name).write_bytes(data)

        reference = REFERENCE_PREFIX + stored_name
        logger.info(f"Picked image {filename} as {reference}")
        return reference

    def resolve(self, reference: Optional[str]) -> Optional[Path]:
        """
        Map an image reference back to its file

        Args:
            reference: Reference returned by pick()

        Returns:
            Path inside the media directory, or None if the reference is not ours
        """
        if not reference or not reference.startswith(REFERENCE_PREFIX):
            return None

        name = reference[len(REFERENCE_PREFIX):]
        if not name or name != secure_filename(name):
            logger.debug(f"Rejected image reference: {reference}")
            return None

        return self.media_dir / name

    def _verify(self, data: bytes, filename: str):
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise InvalidImageError(f"Not an image: {filename}") from e
