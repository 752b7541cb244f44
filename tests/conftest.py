import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from stock_api.main import app
from stock_api.services.stock_service import StockService, get_stock_service


@pytest.fixture
def sample_data():
    return {"AAPL": {"symbol": "AAPL", "price": 150}}


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as client:
        yield client


@pytest_asyncio.fixture
async def sample_client(sample_data):
    """Client whose stock service only knows about `sample_data`."""
    app.dependency_overrides[get_stock_service] = lambda: StockService(sample_data)
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_stock_service, None)
