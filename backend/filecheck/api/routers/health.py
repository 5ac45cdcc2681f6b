from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> str:
    return "Healthy"


@router.get("/readyz", response_class=PlainTextResponse)
async def readyz() -> str:
    return "Ready"
