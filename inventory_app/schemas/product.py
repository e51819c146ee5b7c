import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]

NUMERIC_FIELDS = ("available_qty", "cost", "mrp", "min_stock")
TEXT_FIELDS = ("description", "category", "unit", "notes", "supplier", "location")
RADIX_PREFIXES = ("0x", "0o", "0b")

camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_number(value: Any, default: Number = 0) -> Number:
    """Read ``value`` as a number.

    Numbers and numeric strings are accepted, including unsigned ``0x``,
    ``0o`` and ``0b`` literals. Anything absent, empty, non-numeric or
    non-finite yields ``default``. Digit separators (``"1_000"``) are not
    numeric. Booleans are deliberately not numbers either, so ``true``
    gives ``default`` rather than 1. Integral results are returned as
    ``int`` so ``"12"`` and ``12.0`` both come back as ``12``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return default
        if value[:2].lower() in RADIX_PREFIXES:
            try:
                return int(value, 0)
            except ValueError:
                return default
        try:
            number = float(value)
        except ValueError:
            return default
    elif isinstance(value, float):
        number = value
    else:
        return default

    if not math.isfinite(number):
        return default
    return int(number) if number.is_integer() else number


class ProductCreate(BaseModel):
    """Body of ``POST /inventory/create``.

    ``productName`` and ``sku`` are optional here so the store can report
    every missing one at once. Null text fields take their default and
    numeric fields go through :func:`parse_number`.
    """

    product_name: Optional[str] = Field(None, description="Product name (required)")
    sku: Optional[str] = Field(None, description="Product SKU (required, unique, case-insensitive)")
    description: str = Field("", description="Product description")
    category: str = Field("", description="Product category")
    available_qty: Number = Field(0, description="Quantity on hand")
    unit: str = Field("pcs", description="Unit of measure")
    cost: Number = Field(0, description="Purchase cost")
    mrp: Number = Field(0, description="Maximum retail price")
    notes: str = Field("", description="Free-form notes")
    supplier: str = Field("", description="Supplier name")
    location: str = Field("", description="Storage location")
    min_stock: Number = Field(0, description="Low stock threshold")

    model_config = camel_config

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Number:
        return parse_number(value)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def default_when_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ProductResponse(BaseModel):
    id: str
    product_name: str
    sku: str
    description: str
    category: str
    available_qty: Number
    unit: str
    cost: Number
    mrp: Number
    notes: str
    supplier: str
    location: str
    min_stock: Number
    created_at: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StockSummary(BaseModel):
    total_products: int = 0
    in_stock_count: int = 0
    low_stock_count: int = 0
    out_of_stock_count: int = 0

    model_config = camel_config


class LowStockCountResponse(BaseModel):
    count: int
