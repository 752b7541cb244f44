import pytest

from stock_api.data.stocks import STOCK_DATA


@pytest.mark.asyncio
async def test_get_stock_lowercase_symbol(sample_client):
    response = await sample_client.get("/api/stocks/aapl")
    assert response.status_code == 200
    assert response.json() == {"symbol": "AAPL", "price": 150}


@pytest.mark.asyncio
async def test_get_unknown_stock(sample_client):
    response = await sample_client.get("/api/stocks/ZZZZ")
    assert response.status_code == 404
    assert response.json() == {"message": "Stock not found"}


@pytest.mark.asyncio
async def test_list_stocks_with_override(sample_client):
    response = await sample_client.get("/api/stocks")
    assert response.status_code == 200
    assert response.json() == {"AAPL": {"symbol": "AAPL", "price": 150}}


@pytest.mark.asyncio
async def test_list_stocks(client):
    response = await client.get("/api/stocks")
    assert response.status_code == 200
    assert set(response.json()) == set(STOCK_DATA)


@pytest.mark.asyncio
@pytest.mark.parametrize("symbol", sorted(STOCK_DATA))
async def test_get_every_bundled_stock(client, symbol):
    upper = await client.get(f"/api/stocks/{symbol}")
    lower = await client.get(f"/api/stocks/{symbol.lower()}")
    assert upper.status_code == 200
    assert upper.json() == STOCK_DATA[symbol]
    assert lower.json() == upper.json()


@pytest.mark.asyncio
async def test_unknown_bundled_stock(client):
    response = await client.get("/api/stocks/NOPE")
    assert response.status_code == 404
    assert response.json() == {"message": "Stock not found"}


@pytest.mark.asyncio
async def test_stocks_are_read_only(client):
    response = await client.post("/api/stocks")
    assert response.status_code == 405
