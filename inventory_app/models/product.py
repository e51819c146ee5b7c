from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union

Number = Union[int, float]


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Product:
    id: str
    product_name: str
    sku: str
    description: str = ""
    category: str = ""
    available_qty: Number = 0
    unit: str = "pcs"
    cost: Number = 0
    mrp: Number = 0
    notes: str = ""
    supplier: str = ""
    location: str = ""
    min_stock: Number = 0
    created_at: str = field(default_factory=utc_timestamp)

    @property
    def is_low_stock(self) -> bool:
        return self.available_qty <= self.min_stock

    @property
    def in_stock(self) -> bool:
        return self.available_qty > 0

    @property
    def out_of_stock(self) -> bool:
        return self.available_qty == 0
