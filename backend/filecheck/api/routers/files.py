import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from filecheck.api.deps import get_storage
from filecheck.schemas import Found, NotFound
from filecheck.services.storage import StorageService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


@router.get("/check-file", response_class=PlainTextResponse)
async def check_file(
    file_name: str | None = Query(default=None, alias="fileName"),
    storage: StorageService = Depends(get_storage),
) -> PlainTextResponse:
    if not file_name:
        return PlainTextResponse(
            "Please provide a file name.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    result = await storage.head_object(file_name)

    if isinstance(result, Found):
        logger.debug(
            "Found %s in bucket %s (%s bytes)",
            file_name,
            storage.bucket,
            result.metadata.content_length,
        )
        return PlainTextResponse(f'The file "{file_name}" exists in the bucket.')

    if isinstance(result, NotFound):
        logger.debug("%s not found in bucket %s", file_name, storage.bucket)
        return PlainTextResponse(
            f'The file "{file_name}" does not exist in the bucket.',
            status_code=status.HTTP_404_NOT_FOUND,
        )

    logger.error("[Error]: %s", result.detail)
    return PlainTextResponse(
        "An error occurred while checking the file.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
