"""
Image Optimization Service
Downscale and recompress uploaded images before storage
"""

from io import BytesIO
from PIL import Image
from typing import Tuple

SAVE_FORMATS = {
    "image/png": "PNG",
    "image/webp": "WEBP",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
}


class ImageOptimizer:
    """Shrinks team avatars, project shots and partner logos"""

    MAX_DIMENSION = 2048
    JPEG_QUALITY = 90

    @staticmethod
    def _encode(img: Image.Image, save_format: str) -> bytes:
        buffer = BytesIO()
        if save_format == "JPEG":
            if img.mode != "RGB":
                img = img.convert("RGB")
            img.save(buffer, format="JPEG", quality=ImageOptimizer.JPEG_QUALITY, optimize=True)
        else:
            img.save(buffer, format=save_format, optimize=True)
        return buffer.getvalue()

    @staticmethod
    def optimize(content: bytes, content_type: str) -> Tuple[bytes, str]:
        """
        Fit the image inside MAX_DIMENSION and re-save it in its own format

        Returns:
            (bytes, content type) to store; the original upload when it cannot
            be decoded or the re-encoded file is not smaller
        """
        save_format = SAVE_FORMATS.get(content_type)
        if save_format is None:
            return content, content_type

        try:
            with Image.open(BytesIO(content)) as img:
                img.thumbnail((ImageOptimizer.MAX_DIMENSION, ImageOptimizer.MAX_DIMENSION), Image.Resampling.LANCZOS)
                optimized = ImageOptimizer._encode(img, save_format)
        except (OSError, ValueError):
            return content, content_type

        if len(optimized) >= len(content):
            return content, content_type

        stored_type = "image/jpeg" if save_format == "JPEG" else content_type
        return optimized, stored_type

    @staticmethod
    def get_size_reduction(before: int, after: int) -> str:
        """Size change as a signed percentage, e.g. "-42.0%" """
        if not before or before == after:
            return "0%"
        change = (after - before) / before * 100
        return f"{change:+.1f}%"


# Create singleton instance
image_optimizer = ImageOptimizer()
