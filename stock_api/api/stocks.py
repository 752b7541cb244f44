from fastapi import APIRouter, Depends

from stock_api.services.stock_service import StockService, get_stock_service
from stock_api.utils.logger import logger

router = APIRouter(prefix="/api/stocks")


@router.get("")
async def list_stocks_api(service: StockService = Depends(get_stock_service)):
    """Returns the full dataset as a symbol -> stock object."""
    logger.info("📡 Received request to list stocks")
    return service.list_stocks()


@router.get("/{symbol}")
async def get_stock_api(symbol: str, service: StockService = Depends(get_stock_service)):
    """Returns a single stock; unknown symbols surface as 404 via StockNotFoundError."""
    logger.info(f"📡 Received request for stock: {symbol}")
    return service.get_stock(symbol)
