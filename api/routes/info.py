from fastapi import APIRouter

router = APIRouter(prefix="/api/v1", tags=["info"])

# These will be set by app.py
_generator = None


def init(generator):
    global _generator
    _generator = generator


@router.get("/info")
async def info():
    """Resolved generator options and derived statistics."""
    return _generator.get_info().to_dict()
