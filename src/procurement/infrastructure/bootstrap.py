"""Composition root — settings and logging for the CLI process.

This is the only place that configures logging handlers; domain and
application modules just log through ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

from procurement.infrastructure.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def settings() -> Settings:
    return Settings()


def configure_logging(config: Settings, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.getLevelNamesMapping().get(
        config.log_level, logging.WARNING
    )
    logging.basicConfig(level=level, format=LOG_FORMAT)
