from __future__ import annotations

import importlib
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def load_settings(settings_module: Optional[str] = None):
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def create_roster(settings_module: Optional[str] = None) -> Container:
    """Build the roster from settings and load whatever is stored on disk."""
    settings = load_settings(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(settings=settings)
    container.roster.load()

    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s data_file=%s students=%d month=%d",
            settings.__name__,
            container.repository.path,
            len(container.roster),
            container.roster.current_month,
        )
    return container


@contextmanager
def open_roster(settings_module: Optional[str] = None) -> Iterator[Container]:
    """Load the roster and save it again when the block exits normally."""
    container = create_roster(settings_module)
    yield container
    container.roster.save()
