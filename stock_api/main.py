import os
import yaml
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from stock_api.api import health, stocks
from stock_api.services.self_ping import DEFAULT_INTERVAL_SECONDS, SelfPinger
from stock_api.services.stock_service import StockNotFoundError
from stock_api.utils.logger import configure_logging, logger

# -----------------------------------------------------------------------------
# Load environment variables
# -----------------------------------------------------------------------------
load_dotenv()

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_PORT = 3000

def get_port() -> int:
    """Listen port from $PORT; unset or empty falls back to 3000."""
    return int(os.getenv("PORT") or DEFAULT_PORT)

PORT = get_port()
HOST = os.getenv("HOST", "0.0.0.0")

# -----------------------------------------------------------------------------
# Load configuration from YAML
# -----------------------------------------------------------------------------
CONFIG_PATH = os.getenv("CONFIG_PATH", os.path.join(PROJECT_ROOT, "config", "config.yaml"))

def load_config(path: str = CONFIG_PATH) -> dict:
    try:
        with open(path, "r") as f:
            cfg = yaml.safe_load(f)
            if not cfg:
                raise ValueError("Config file is empty or invalid.")
            return cfg
    except FileNotFoundError:
        logging.error(f"❌ Config not found at {path}")
        raise SystemExit(f"Config not found: {path}")
    except yaml.YAMLError as e:
        logging.error(f"❌ Error parsing {path}: {e}")
        raise SystemExit(f"Error parsing config: {e}")
    except Exception as e:
        logging.error(f"❌ Unexpected error loading config: {e}")
        raise SystemExit(f"Failed to load config: {e}")

config = load_config()

# -----------------------------------------------------------------------------
# Set up logging
# -----------------------------------------------------------------------------
configure_logging(config.get("logging", {}))

# -----------------------------------------------------------------------------
# Self-ping
# -----------------------------------------------------------------------------
def build_self_pinger(ping_cfg: dict, port: int = PORT) -> Optional[SelfPinger]:
    """
    Builds the self-ping task from the `self_ping` config section.
    SELF_PING_* environment variables take precedence over the YAML values.
    Returns None when self-ping is disabled.
    """
    enabled = ping_cfg.get("enabled")
    if enabled is None:
        enabled = True
    enabled = os.getenv("SELF_PING_ENABLED") or str(enabled)
    if enabled.strip().lower() not in ("1", "true", "yes", "on"):
        logger.info("Self-ping disabled")
        return None

    url = os.getenv("SELF_PING_URL") or ping_cfg.get("url") or f"http://localhost:{port}/api/test"
    interval = float(os.getenv(
        "SELF_PING_INTERVAL_SECONDS",
        ping_cfg.get("interval_seconds", DEFAULT_INTERVAL_SECONDS),
    ))
    timeout = ping_cfg.get("timeout_seconds")
    return SelfPinger(url, interval_seconds=interval, timeout=timeout)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: start the self-ping loop. Shutdown: cancel it."""
    pinger = build_self_pinger(config.get("self_ping", {}))
    app.state.self_pinger = pinger
    if pinger:
        pinger.start()
    logger.info("✅ Startup complete")

    try:
        yield
    finally:
        if pinger:
            await pinger.stop()

# -----------------------------------------------------------------------------
# Initialize FastAPI
# -----------------------------------------------------------------------------
app_cfg = config.get("app", {})
app = FastAPI(
    title=app_cfg.get("name", "Stock API"),
    version=app_cfg.get("version", "0.1.0"),
    lifespan=lifespan,
)

# -----------------------------------------------------------------------------
# CORS
# -----------------------------------------------------------------------------
allowed_origins = os.getenv("ALLOWED_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
app.include_router(stocks.router, tags=["Stocks"])
app.include_router(health.router, tags=["Health"])

@app.exception_handler(StockNotFoundError)
async def stock_not_found_handler(request: Request, exc: StockNotFoundError):
    return JSONResponse(status_code=404, content={"message": "Stock not found"})

# -----------------------------------------------------------------------------
# Root
# -----------------------------------------------------------------------------
@app.get("/")
async def root():
    return {"message": f"Welcome to {app_cfg.get('name', 'the API')}!"}

# -----------------------------------------------------------------------------
# Startup log
# -----------------------------------------------------------------------------
logger.info(f"✅ {app_cfg.get('name', 'API')} is starting up!")
