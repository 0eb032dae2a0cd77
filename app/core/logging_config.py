"""Root logger setup for the API process."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a console handler to the root logger.

    Does nothing if the root logger already has handlers (repeated
    ``create_app`` calls, pytest's log capture, uvicorn's own config).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
