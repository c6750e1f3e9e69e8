"""Identifier routes: generate, decode and split."""

from datetime import datetime

from fastapi import APIRouter, HTTPException, Query

from core.errors import ClassRequirementUnsatisfiable, DecodingError, UsageError
from internal.logging import get_logger
from utils.timestamp import format_millis, to_millis

router = APIRouter(prefix="/api/v1", tags=["ids"])
log = get_logger().bind(component="api", route="ids")

# These will be set by app.py
_generator = None


def init(generator):
    """Initialize with the shared generator."""
    global _generator
    _generator = generator


def _reject(exc):
    """Map rando errors onto HTTP errors."""
    if isinstance(exc, DecodingError):
        status_code = 422
    elif isinstance(exc, ClassRequirementUnsatisfiable):
        status_code = 503
    else:
        status_code = 400
    log.warn("request rejected", error=exc, status=status_code)
    return HTTPException(status_code=status_code, detail=exc.to_dict())


@router.get("/ids")
async def generate(count: int = Query(1, ge=1, le=1000), date: datetime | None = None):
    """Generate `count` identifiers, optionally stamped with `date`."""
    try:
        return {"ids": [_generator.generate(date=date) for _ in range(count)]}
    except (UsageError, ClassRequirementUnsatisfiable) as exc:
        raise _reject(exc) from exc


@router.get("/ids/{identifier:path}/date")
async def decode_date(identifier: str):
    """Recover the instant embedded in an identifier."""
    try:
        date = _generator.get_date(identifier)
    except (UsageError, DecodingError) as exc:
        raise _reject(exc) from exc
    return {"id": identifier, "date": format_millis(date), "ms": to_millis(date)}


@router.get("/ids/{identifier:path}/segments")
async def segments(identifier: str):
    """Split an identifier into its random and timestamp segments."""
    try:
        return {
            "id": identifier,
            "random": _generator.get_random_segment(identifier),
            "timestamp": _generator.get_timestamp_segment(identifier),
        }
    except UsageError as exc:
        raise _reject(exc) from exc
