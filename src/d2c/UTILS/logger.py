"""
Logging helpers. Diagnostics go to stderr so that stdout only carries
the generated document.
"""
import logging
import sys

ROOT_LOGGER = "d2c"


class StderrHandler(logging.StreamHandler):
    """
    Writes to whatever sys.stderr is at emit time, so redirected or
    captured streams keep receiving records.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_logging(verbose: bool = False) -> None:
    """
    Attaches a stderr handler to the package's root logger. Calling it
    again only updates the level.

    :param verbose: Emit debug messages as well.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(isinstance(h, StderrHandler) for h in root_logger.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger below the package's root logger.

    :param name: Logger name, typically __name__.
    """
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
