from typing import Any, Dict, Mapping

from stock_api.data.stocks import STOCK_DATA, validate_stock_data
from stock_api.utils.logger import logger


class StockNotFoundError(LookupError):
    """Raised when a requested symbol is not in the dataset."""

    def __init__(self, symbol: str):
        super().__init__(f"Stock not found: {symbol}")
        self.symbol = symbol


class StockService:
    """Read-only lookups over a fixed symbol -> stock record mapping."""

    def __init__(self, data: Mapping[str, Dict[str, Any]]):
        self._data = data

    def list_stocks(self) -> Mapping[str, Dict[str, Any]]:
        return self._data

    def get_stock(self, symbol: str) -> Dict[str, Any]:
        """Returns the stored record for `symbol` (case-insensitive)."""
        key = symbol.upper()
        stock = self._data.get(key)
        if stock is None:
            logger.warning(f"❌ Stock not found: {symbol}")
            raise StockNotFoundError(symbol)
        logger.debug(f"✅ Stock found: {key}")
        return stock


stock_service = StockService(validate_stock_data(STOCK_DATA))


async def get_stock_service() -> StockService:
    """FastAPI dependency returning the process-wide stock service."""
    return stock_service
