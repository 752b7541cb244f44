from fastapi import APIRouter

from stock_api.utils.logger import logger

router = APIRouter(prefix="/api/test")


@router.get("")
async def test_api():
    """Fixed acknowledgement; also the self-ping target."""
    logger.info("📥 /api/test was called")
    return {"message": "Test API hit"}
