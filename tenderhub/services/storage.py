import uuid

import aiobotocore.session

from tenderhub.core.config import settings
from tenderhub.core.errors import NotFoundOrForbidden, PayloadTooLarge, UnsupportedMediaType, ValidationError
from tenderhub.core.logging_config import logger

LOGO_PREFIX = "company-logos"
DOCUMENT_PREFIX = "tender-documents"


class S3Storage:
    """Uploads and removes objects in an S3-compatible bucket."""

    def __init__(self):
        self.session = aiobotocore.session.get_session()

    def _client(self):
        return self.session.create_client(
            "s3",
            endpoint_url=settings.S3_ENDPOINT_URL,
            aws_access_key_id=settings.S3_ACCESS_KEY,
            aws_secret_access_key=settings.S3_SECRET_KEY,
            region_name=settings.S3_REGION,
        )

    def public_url(self, key: str) -> str:
        return f"{settings.S3_ENDPOINT_URL}/{settings.S3_BUCKET_NAME}/{key}"

    async def upload(self, key: str, content: bytes, content_type: str) -> str:
        async with self._client() as s3_client:
            await s3_client.put_object(
                Bucket=settings.S3_BUCKET_NAME,
                Key=key,
                Body=content,
                ContentType=content_type,
            )
        url = self.public_url(key)
        logger.info(f"Uploaded {key} to {url}")
        return url

    async def delete(self, key: str) -> None:
        async with self._client() as s3_client:
            await s3_client.delete_object(Bucket=settings.S3_BUCKET_NAME, Key=key)
        logger.info(f"Deleted {key}")


def get_storage() -> S3Storage:
    return S3Storage()


def check_upload(content: bytes | None, content_type: str | None, image_only: bool = False) -> None:
    if not content:
        raise ValidationError("No file uploaded")
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise PayloadTooLarge(f"File exceeds {settings.MAX_UPLOAD_BYTES // (1024 * 1024)}MB limit")
    if image_only and not (content_type or "").startswith("image/"):
        raise UnsupportedMediaType("Only image files are allowed")


def build_key(prefix: str, account_id, filename: str | None) -> str:
    extension = ""
    if filename and "." in filename:
        extension = "." + filename.rsplit(".", 1)[1].lower()
    return f"{prefix}/{account_id}-{uuid.uuid4()}{extension}"


def check_key_owner(key: str, account_id) -> None:
    """Only keys minted for the caller's account may be removed."""
    folder, _, name = key.partition("/")
    if folder not in (LOGO_PREFIX, DOCUMENT_PREFIX) or not name.startswith(f"{account_id}-"):
        logger.warning(f"Account {account_id} tried to delete {key}")
        raise NotFoundOrForbidden("File not found or access denied")
