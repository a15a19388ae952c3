"""Runtime settings for the procurement CLI.

Every field defaults from an environment variable so the CLI can be tuned
without flags:

  PROCUREMENT_DEFAULT_CURRENCY  currency used when --currency is omitted (USD)
  PROCUREMENT_LOG_LEVEL         root log level (WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    default_currency: str = field(
        default_factory=lambda: os.getenv("PROCUREMENT_DEFAULT_CURRENCY", "USD")
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("PROCUREMENT_LOG_LEVEL", "WARNING").upper()
    )
