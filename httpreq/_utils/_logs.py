import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("httpreq")

LOG_FORMAT = "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s"


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Sends the ``httpreq`` logger to stderr, at DEBUG level when asked.

    Calling it again only changes the level.
    """
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
    if any(getattr(h, "name", None) == "httpreq.stderr" for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name("httpreq.stderr")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
