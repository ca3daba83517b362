"""Load a Catalog from a JSON file.

Expected format is an array of objects::

    [
      {"id": "P100", "name": "Laptop", "price": "999.99"},
      ...
    ]

``price`` may be a string or a number.  All prices are US dollars; an
entry naming any other ``currency`` is rejected.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from shop.domain.exceptions import ConfigurationError, DomainException
from shop.domain.model.catalog import Catalog
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money

STORE_CURRENCY = "USD"


def load_catalog(file_path: Path) -> Catalog:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read catalog file {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Catalog file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ConfigurationError(f"Catalog file {file_path} must contain a JSON array")

    try:
        return Catalog(_to_domain(item) for item in raw)
    except (KeyError, TypeError, AttributeError, InvalidOperation) as exc:
        raise ConfigurationError(f"Malformed product entry in {file_path}: {exc!r}") from exc
    except DomainException as exc:
        raise ConfigurationError(f"Invalid catalog {file_path}: {exc}") from exc


def _to_domain(item: dict) -> Product:
    currency = item.get("currency", STORE_CURRENCY)
    if currency != STORE_CURRENCY:
        raise ConfigurationError(
            f"Product '{item['id']}' is priced in {currency}; only {STORE_CURRENCY} is supported"
        )
    return Product(
        id=str(item["id"]).strip(),
        name=str(item["name"]).strip(),
        price=Money(Decimal(str(item["price"]))),
    )
