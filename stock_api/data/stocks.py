from typing import Any, Dict

from stock_api.models.stock import Stock

# Static snapshot served by /api/stocks. Keys are uppercase ticker symbols.
STOCK_DATA: Dict[str, Dict[str, Any]] = {
    "AAPL": {
        "symbol": "AAPL",
        "name": "Apple Inc.",
        "price": 189.84,
        "change": 1.23,
        "changePercent": 0.65,
        "marketCap": 2950000000000,
        "sector": "Technology",
    },
    "MSFT": {
        "symbol": "MSFT",
        "name": "Microsoft Corporation",
        "price": 415.5,
        "change": -2.1,
        "changePercent": -0.5,
        "marketCap": 3090000000000,
        "sector": "Technology",
    },
    "GOOGL": {
        "symbol": "GOOGL",
        "name": "Alphabet Inc.",
        "price": 171.95,
        "change": 0.84,
        "changePercent": 0.49,
        "marketCap": 2120000000000,
        "sector": "Communication Services",
    },
    "AMZN": {
        "symbol": "AMZN",
        "name": "Amazon.com, Inc.",
        "price": 183.63,
        "change": 2.41,
        "changePercent": 1.33,
        "marketCap": 1910000000000,
        "sector": "Consumer Discretionary",
    },
    "TSLA": {
        "symbol": "TSLA",
        "name": "Tesla, Inc.",
        "price": 177.46,
        "change": -4.02,
        "changePercent": -2.22,
        "marketCap": 566000000000,
        "sector": "Consumer Discretionary",
    },
    "NVDA": {
        "symbol": "NVDA",
        "name": "NVIDIA Corporation",
        "price": 121.79,
        "change": 3.67,
        "changePercent": 3.11,
        "marketCap": 2990000000000,
        "sector": "Technology",
    },
    "META": {
        "symbol": "META",
        "name": "Meta Platforms, Inc.",
        "price": 504.22,
        "change": 6.11,
        "changePercent": 1.23,
        "marketCap": 1280000000000,
        "sector": "Communication Services",
    },
    "JPM": {
        "symbol": "JPM",
        "name": "JPMorgan Chase & Co.",
        "price": 198.88,
        "change": -0.72,
        "changePercent": -0.36,
        "marketCap": 571000000000,
        "sector": "Financials",
    },
}


def validate_stock_data(data: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Checks that every key is an uppercase symbol matching its record and that
    each record parses as a Stock. Returns the mapping unchanged.
    """
    for symbol, record in data.items():
        if symbol != symbol.upper():
            raise ValueError(f"Stock key '{symbol}' must be uppercase")
        stock = Stock(**record)
        if stock.symbol != symbol:
            raise ValueError(f"Stock key '{symbol}' does not match record symbol '{stock.symbol}'")
    return data
