from datetime import datetime, UTC

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from luct.utils.utils import SERVICE_NAME

router = APIRouter(tags=["system"])


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(UTC).isoformat(), "service": SERVICE_NAME}


@router.get("/", response_class=PlainTextResponse)
def root():
    return "LUCT Reporting System Backend is running!"
