import logging
from typing import Dict, List, Optional

from inventory_app.errors import ConflictError, ValidationError
from inventory_app.ids import IdGenerator
from inventory_app.models.product import Product
from inventory_app.schemas.product import ProductCreate, StockSummary

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (("product_name", "productName"), ("sku", "sku"))


class ProductStore:
    """In-memory product catalogue keyed by generated id, kept in insertion order."""

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self._products: Dict[str, Product] = {}
        self._new_id = id_generator or IdGenerator()

    def __len__(self) -> int:
        return len(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        """Get a product by ID."""
        return self._products.get(product_id)

    def get_by_sku(self, sku: str) -> Optional[Product]:
        """Get a product by SKU (case-insensitive)."""
        wanted = sku.lower()
        for product in self._products.values():
            if product.sku.lower() == wanted:
                return product
        return None

    def create(self, product_data: ProductCreate) -> Product:
        """Create a new product."""
        missing = [
            wire_name
            for attr, wire_name in REQUIRED_FIELDS
            if not getattr(product_data, attr)
        ]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

        if self.get_by_sku(product_data.sku) is not None:
            raise ConflictError("SKU must be unique.")

        product = Product(id=self._new_id(), **product_data.model_dump())
        self._products[product.id] = product
        logger.info("Created product id=%s sku=%s", product.id, product.sku)
        return product

    def list_all(self) -> List[Product]:
        """All products, oldest first."""
        return list(self._products.values())

    def stock_summary(self) -> StockSummary:
        """Count products per stock bucket. Buckets overlap: an empty shelf is also low stock."""
        summary = StockSummary()
        for product in self._products.values():
            summary.total_products += 1
            if product.in_stock:
                summary.in_stock_count += 1
            if product.is_low_stock:
                summary.low_stock_count += 1
            if product.out_of_stock:
                summary.out_of_stock_count += 1
        return summary

    def low_stock_alerts(self) -> List[Product]:
        """Products whose quantity is at or below their minimum stock."""
        return [p for p in self._products.values() if p.is_low_stock]

    def low_stock_count(self) -> int:
        return sum(1 for p in self._products.values() if p.is_low_stock)
