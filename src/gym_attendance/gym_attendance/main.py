from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .common.datetime_utils import Clock
from .common.logging import configure_logging
from .container import Container, build_container


def create_container(*, clock: Optional[Clock] = None) -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if bool(getattr(settings, "DEBUG", False)):
        print(
            "[gym-attendance] settings=", settings_module,
            " timezone=", getattr(settings, "TIMEZONE", "UTC"),
        )

    container = build_container(settings=settings, clock=clock)
    logger.debug("container ready (settings=%s)", settings_module)
    return container
