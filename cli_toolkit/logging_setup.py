"""Logging configuration shared by the command-line entry points."""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries program output."""
    if verbose:
        level = "INFO"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT
    )
