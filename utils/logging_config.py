"""
Console logging for the app.

Streamlit re-executes the script on every interaction, so ``setup_logging``
must be safe to call repeatedly: the root logger is configured only once.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger unless one exists.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``). Case insensitive; unknown
        names fall back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
