import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER_NAME = "flatquery"


def setup_sdk_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Configures the logging output of the flatquery package.

    The package logs under the 'flatquery' namespace and stays silent (via a
    `NullHandler`) until this function is called. Two output modes are
    available: a 'pretty' mode rendered by Rich, and a plain stream mode
    writing to stderr. Handlers installed by previous calls are removed, so
    calling this function again only changes the configuration.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "INFO", "WARNING").
            Defaults to "INFO".
        pretty (bool): If True, uses a `RichHandler` with colors, timestamps
            and formatted tracebacks.
        console (Optional[rich.console.Console]): Console used by the Rich
            handler. Ignored when `pretty` is False. Defaults to a new
            Console(stderr=True).
        propagate (bool): Whether records bubble up to the root logger.
            Disabled by default to avoid duplicated output under pytest.
    """
    logger = root_logging.getLogger(_ROOT_LOGGER_NAME)

    # Clear existing handlers to prevent duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    if pretty:
        console = console or Console(stderr=True)

        handler = RichHandler(
            level=level,
            console=console,
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(
            root_logging.Formatter(
                fmt="[dim white]%(name)s[/dim white]: %(message)s", datefmt="[%X]"
            )
        )
        init_message = f"flatquery logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = root_logging.StreamHandler(sys.stderr)
        # Time [Level] Name: Message
        handler.setFormatter(
            root_logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        init_message = f"flatquery logging initialized at level: {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None):
    """
    Returns a logger within the flatquery namespace.

    Args:
        name (Optional[str]): Usually `__name__` of the calling module
            (e.g., 'flatquery.models.query.builders'). If None, the
            top-level 'flatquery' logger is returned.

    Returns:
        logging.Logger: The requested logger.
    """
    if name is not None:
        return root_logging.getLogger(name=name)
    return root_logging.getLogger(_ROOT_LOGGER_NAME)
