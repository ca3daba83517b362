"""Runtime configuration for a store session.

Defaults apply when the CLI is started without options.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_FILE = Path("orders.log")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class StoreConfig:
    log_file: Path = DEFAULT_LOG_FILE
    catalog_file: Path | None = None  # None -> built-in catalog
    max_cart_lines: int | None = None  # None -> unbounded
    max_orders: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL
