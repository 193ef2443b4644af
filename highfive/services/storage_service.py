"""
Storage Service
Supabase Storage integration for uploaded images
"""

import logging
import os
from typing import Dict, List, Tuple
from uuid import uuid4
import httpx
from fastapi import HTTPException, status
from highfive.config import settings
from highfive.services.image_optimizer import image_optimizer

logger = logging.getLogger(__name__)

EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}


class StorageService:
    """Supabase Storage helper"""

    @staticmethod
    def _ensure_config():
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Supabase Storage is not configured"
            )

    @staticmethod
    def _headers() -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {settings.SUPABASE_SERVICE_ROLE_KEY}",
            "apikey": settings.SUPABASE_SERVICE_ROLE_KEY,
        }

    @staticmethod
    def public_url(path: str) -> str:
        base = settings.SUPABASE_URL.rstrip("/")
        return f"{base}/storage/v1/object/public/{settings.STORAGE_BUCKET}/{path}"

    @staticmethod
    def validate(filename: str, content: bytes, content_type: str) -> None:
        """
        Check an upload against the allowed types and the size limit

        Raises:
            HTTPException 400 naming the offending file
        """
        if content_type not in settings.allowed_image_types:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{filename}: only image files are allowed"
            )

        if len(content) > settings.MAX_UPLOAD_SIZE:
            limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{filename}: file exceeds the {limit_mb}MB limit"
            )

    @staticmethod
    def build_path(filename: str, content_type: str) -> str:
        """Unique object path under uploads/, keeping the file extension"""
        ext = os.path.splitext(filename or "")[1].lower() or EXTENSIONS.get(content_type, "")
        return f"uploads/{uuid4()}{ext}"

    @staticmethod
    async def upload_bytes(path: str, content: bytes, content_type: str) -> str:
        StorageService._ensure_config()

        base = settings.SUPABASE_URL.rstrip("/")
        bucket = settings.STORAGE_BUCKET
        url = f"{base}/storage/v1/object/{bucket}/{path}"

        headers = StorageService._headers()
        headers["Content-Type"] = content_type or "application/octet-stream"
        headers["x-upsert"] = "false"

        async with httpx.AsyncClient(timeout=30) as client:
            resp = await client.post(url, headers=headers, content=content)

        if resp.status_code not in (200, 201):
            logger.warning("Storage upload of %s failed: %s", path, resp.text)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Storage upload failed: {resp.text}"
            )

        return StorageService.public_url(path)

    @staticmethod
    async def upload_image(filename: str, content: bytes, content_type: str) -> str:
        """Validate, optimize and store one image; returns its public URL"""

        StorageService.validate(filename, content, content_type)

        optimized, optimized_type = image_optimizer.optimize(content, content_type)
        logger.info(
            "Optimized %s (%s)",
            filename,
            image_optimizer.get_size_reduction(len(content), len(optimized))
        )

        path = StorageService.build_path(filename, optimized_type)
        return await StorageService.upload_bytes(path, optimized, optimized_type)

    @staticmethod
    async def upload_many(files: List[Tuple[str, bytes, str]]) -> Tuple[List[str], List[str]]:
        """
        Upload several images, collecting per-file errors

        Args:
            files: (filename, content, content_type) triples

        Returns:
            Tuple of (uploaded URLs, error messages)
        """
        if len(files) > settings.MAX_UPLOAD_FILES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"At most {settings.MAX_UPLOAD_FILES} files can be uploaded at once"
            )

        urls = []
        errors = []

        for filename, content, content_type in files:
            try:
                urls.append(await StorageService.upload_image(filename, content, content_type))
            except HTTPException as e:
                errors.append(str(e.detail))

        return urls, errors

    @staticmethod
    async def delete_path(path: str) -> None:
        StorageService._ensure_config()

        base = settings.SUPABASE_URL.rstrip("/")
        url = f"{base}/storage/v1/object/{settings.STORAGE_BUCKET}/{path}"

        async with httpx.AsyncClient(timeout=30) as client:
            resp = await client.delete(url, headers=StorageService._headers())

        if resp.status_code not in (200, 204, 404):
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Storage delete failed: {resp.text}"
            )

    @staticmethod
    async def delete_by_url(file_url: str) -> None:
        StorageService._ensure_config()

        prefix = StorageService.public_url("")

        if file_url.startswith(prefix):
            await StorageService.delete_path(file_url[len(prefix):])
            return

        # Links to images hosted elsewhere are left alone
        logger.info("Skipping delete of external image %s", file_url)


# Create singleton instance
storage_service = StorageService()
