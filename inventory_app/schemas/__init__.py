from inventory_app.schemas.product import (
    ProductCreate,
    ProductResponse,
    StockSummary,
    LowStockCountResponse,
)
from inventory_app.schemas.user import RegisterRequest, SignInRequest, UserResponse
from inventory_app.schemas.common import HealthResponse, ErrorResponse

__all__ = [
    "ProductCreate",
    "ProductResponse",
    "StockSummary",
    "LowStockCountResponse",
    "RegisterRequest",
    "SignInRequest",
    "UserResponse",
    "HealthResponse",
    "ErrorResponse",
]
