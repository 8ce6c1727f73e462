"""Catalog loading helpers."""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .models import Product

LOGGER = logging.getLogger(__name__)

FEATURE_SEPARATOR = "|"


@dataclass(frozen=True)
class CatalogData:
    products: Mapping[str, Product] = field(default_factory=lambda: MappingProxyType({}))
    version: Optional[str] = None

    def get(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    def ids(self) -> List[str]:
        return list(self.products)

    def __len__(self) -> int:
        return len(self.products)


def _detect_delimiter(sample: str) -> str:
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=",;\t")
        return dialect.delimiter
    except csv.Error:
        if ";" in sample and "," not in sample:
            return ";"
        return ","


def _read_csv(path: Path) -> List[Dict]:
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8", newline="") as handle:
        sample = handle.read(1024)
        handle.seek(0)
        delimiter = _detect_delimiter(sample)
        reader = csv.DictReader(handle, delimiter=delimiter)
        return [{k: (v.strip() if isinstance(v, str) else v) for k, v in row.items()} for row in reader]


def _to_product(row: Dict) -> Product:
    features = [item.strip() for item in (row.get("features") or "").split(FEATURE_SEPARATOR) if item.strip()]
    return Product(
        id=row["id"],
        model=row.get("model") or row["id"],
        name=row.get("name") or "",
        format=row.get("format") or "A4",
        color=(row.get("color") or "true").lower() in {"true", "1", "yes"},
        speed=int(float(row.get("speed") or 0)),
        volume_min=int(float(row.get("volume_min") or 0)),
        volume_max=int(float(row.get("volume_max") or 0)),
        ideal_for=row.get("ideal_for") or "",
        description=row.get("description") or "",
        features=features,
    )


def load_catalog(base_path: Path) -> CatalogData:
    products_path = base_path / "products.csv"
    rows = _read_csv(products_path)
    if not rows:
        LOGGER.warning("Product catalog at %s is empty or missing", products_path)

    products: Dict[str, Product] = {}
    for row in rows:
        if not row.get("id"):
            continue
        products[row["id"]] = _to_product(row)

    version = None
    if rows:
        version = rows[0].get("version_catalogue") or None

    LOGGER.info("Loaded %d products from %s", len(products), products_path)
    return CatalogData(products=MappingProxyType(products), version=version)
