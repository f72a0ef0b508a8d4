import logging
import sys

from .constants import LOGGER_NAME


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the SDK logger.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not any(getattr(h, "_stripe_sdk", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        handler._stripe_sdk = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
