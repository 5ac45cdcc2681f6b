import asyncio
import logging
from typing import Any, Final

import boto3
from botocore.client import BaseClient, Config
from botocore.exceptions import BotoCoreError, ClientError

from filecheck.core.config import Settings
from filecheck.schemas import Failure, Found, LookupResult, NotFound, ObjectMetadata

logger = logging.getLogger(__name__)

NOT_FOUND_CODES: Final[frozenset[str]] = frozenset({"404", "NotFound", "NoSuchKey"})


def _is_not_found(exc: ClientError) -> bool:
    error = exc.response.get("Error", {})
    status_code = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return str(error.get("Code", "")) in NOT_FOUND_CODES or status_code == 404


def _metadata_from_response(response: dict[str, Any]) -> ObjectMetadata:
    return ObjectMetadata(
        content_length=response.get("ContentLength"),
        content_type=response.get("ContentType"),
        etag=response.get("ETag"),
        last_modified=response.get("LastModified"),
    )


class StorageService:
    """Metadata lookups against the configured S3 bucket."""

    def __init__(self, settings: Settings, client: BaseClient | None = None) -> None:
        self.settings = settings
        self.bucket = settings.bucket_name
        self.client = client or self._create_client(settings)

    @staticmethod
    def _create_client(settings: Settings) -> BaseClient:
        # Empty credentials fall through to boto3's default provider chain.
        session = boto3.session.Session()
        return session.client(
            "s3",
            endpoint_url=str(settings.s3_endpoint) if settings.s3_endpoint else None,
            aws_access_key_id=settings.aws_access_key or None,
            aws_secret_access_key=settings.aws_secret_key or None,
            region_name=settings.aws_region,
            config=Config(signature_version="s3v4"),
        )

    async def head_object(self, key: str) -> LookupResult:
        """Check whether ``key`` exists without fetching the object body."""

        def _head() -> dict[str, Any]:
            return self.client.head_object(Bucket=self.bucket, Key=key)

        try:
            response = await asyncio.to_thread(_head)
        except ClientError as exc:
            if _is_not_found(exc):
                return NotFound(key=key)
            error = exc.response.get("Error", {})
            return Failure(
                key=key,
                detail=f"{error.get('Code', 'Unknown')}: {error.get('Message') or exc}",
            )
        except BotoCoreError as exc:
            return Failure(key=key, detail=str(exc))
        except Exception as exc:  # pragma: no cover - unexpected SDK errors surface as failures
            return Failure(key=key, detail=f"{type(exc).__name__}: {exc}")

        return Found(key=key, metadata=_metadata_from_response(response))

    def close(self) -> None:
        self.client.close()
        logger.debug("Closed S3 client for bucket %s", self.bucket)
