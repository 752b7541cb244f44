"""Run the Stock API under uvicorn on $HOST:$PORT (default 0.0.0.0:3000)."""
import uvicorn

from stock_api.main import HOST, PORT, app
from stock_api.utils.logger import logger


def main():
    logger.info(f"🚀 Server running on http://localhost:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
