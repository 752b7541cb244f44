import logging
import os

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"

# Create logger instance
logger = logging.getLogger("StockAPI")


def configure_logging(log_cfg: dict):
    """Configure root logging from the `logging` section of config.yaml."""
    handlers = []
    log_file = log_cfg.get("log_file")
    if log_file:
        # Ensure log directory exists
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    if log_cfg.get("use_stream_handler", True):
        handlers.append(logging.StreamHandler())
    if not handlers:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=str(log_cfg.get("level", "INFO")).upper(),
        format=log_cfg.get("format", DEFAULT_FORMAT),
        handlers=handlers,
    )
    logger.debug("✅ Logger initialized successfully")
