"""
Task Image Loader
Resolves image references to pixel data and renders list thumbnails
"""

import io
import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from .picker import ImagePicker

logger = logging.getLogger(__name__)


class ImageLoader:
    """Load task images and render them as thumbnails"""

    def __init__(self, picker: ImagePicker, size: Tuple[int, int] = (64, 64)):
        """
        Initialize image loader

        Args:
            picker: Picker that issued the image references
            size: Thumbnail size (width, height)
        """
        self.picker = picker
        self.size = tuple(size)

    def load(self, reference: Optional[str]) -> Optional[Image.Image]:
        """
        Load the image behind a reference

        Args:
            reference: Image reference from the picker

        Returns:
            PIL Image or None if the reference cannot be loaded
        """
        path = self.picker.resolve(reference)
        if path is None or not path.exists():
            logger.debug(f"Image not found for reference: {reference}")
            return None

        try:
            with Image.open(path) as image:
                image.load()
                return image.copy()
        except Exception as e:
            logger.warning(f"Failed to load image {reference}: {e}")
            return None

    def thumbnail_png(self, reference: Optional[str]) -> bytes:
        """
        Render a thumbnail for a reference as PNG bytes

        Args:
            reference: Image reference from the picker

        Returns:
            PNG data, a placeholder if the image cannot be loaded
        """
        image = self.load(reference)
        if image is None:
            thumbnail = self.create_placeholder()
        else:
            thumbnail = self._create_thumbnail(image)

        buffer = io.BytesIO()
        thumbnail.save(buffer, format='PNG')
        return buffer.getvalue()

    def _create_thumbnail(self, image: Image.Image) -> Image.Image:
        """
        Fit an image into the thumbnail box

        Args:
            image: Source PIL Image

        Returns:
            RGB image of exactly self.size, aspect ratio preserved
        """
        if image.mode in ('RGBA', 'LA', 'PA') or 'transparency' in image.info:
            # Transparent areas become white, matching the canvas
            image = image.convert('RGBA')
            background = Image.new('RGBA', image.size, 'white')
            image = Image.alpha_composite(background, image).convert('RGB')
        elif image.mode != 'RGB':
            image = image.convert('RGB')

        image.thumbnail(self.size, Image.Resampling.LANCZOS)

        thumbnail = Image.new('RGB', self.size, 'white')
        offset = ((self.size[0] - image.size[0]) // 2, (self.size[1] - image.size[1]) // 2)
        thumbnail.paste(image, offset)
        return thumbnail

    def create_placeholder(self) -> Image.Image:
        """Draw a generic picture icon for images that cannot be loaded"""
        width, height = self.size
        image = Image.new('RGB', self.size, 'white')
        draw = ImageDraw.Draw(image)

        margin = max(2, width // 10)
        draw.rectangle([(margin, margin), (width - margin, height - margin)], outline='gray', width=2)

        # Mountain and sun
        draw.polygon(
            [(margin + 2, height - margin - 2),
             (width // 2, height // 2),
             (width - margin - 2, height - margin - 2)],
            fill='lightgray'
        )
        radius = max(2, width // 10)
        sun_x, sun_y = width - margin - radius * 2, margin + radius * 2
        draw.ellipse([(sun_x - radius, sun_y - radius), (sun_x + radius, sun_y + radius)], fill='gray')
        return image
