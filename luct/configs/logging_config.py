import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> None:
    """Configure process-wide logging for the API server and CLI scripts."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
    # uvicorn installs its own handlers, keep its access log on our level
    logging.getLogger("uvicorn.access").setLevel(logging.getLogger().level)
