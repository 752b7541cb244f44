from typing import Optional
from pydantic import BaseModel, ConfigDict


class Stock(BaseModel):
    """Pydantic model for a stock record served by the API. Unknown fields are kept as-is."""
    model_config = ConfigDict(extra="allow")

    symbol: str  # Ticker symbol, uppercase (e.g., AAPL, TSLA)
    name: Optional[str] = None  # Company name (e.g., Apple Inc.)
    price: Optional[float] = None  # Last price in USD
    change: Optional[float] = None  # Absolute change since previous close
    changePercent: Optional[float] = None  # Percent change since previous close
    marketCap: Optional[int] = None  # Market capitalisation in USD
    sector: Optional[str] = None
