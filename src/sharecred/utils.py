import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

log = logging.getLogger("sharecred")


def configure_logging(verbose: bool = False):
    """Configure root logging once. Log records go to stderr, away from prompts."""
    level_name = "INFO" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )
