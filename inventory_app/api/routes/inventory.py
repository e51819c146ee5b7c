from fastapi import APIRouter, Depends
from typing import List, Optional
from inventory_app.api.deps import READ_METHODS, get_product_store
from inventory_app.schemas.common import ErrorResponse
from inventory_app.schemas.product import (
    ProductCreate,
    ProductResponse,
    StockSummary,
    LowStockCountResponse
)
from inventory_app.services.product_store import ProductStore

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.api_route("/getall", methods=READ_METHODS, response_model=List[ProductResponse])
async def list_products(products: ProductStore = Depends(get_product_store)):
    """List every product in insertion order."""
    return [ProductResponse.model_validate(p) for p in products.list_all()]


@router.post(
    "/create",
    response_model=ProductResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}
)
async def create_product(
    product_data: Optional[ProductCreate] = None,
    products: ProductStore = Depends(get_product_store)
):
    """Create a new product."""
    product = products.create(product_data or ProductCreate())
    return ProductResponse.model_validate(product)


@router.api_route("/stock-summary", methods=READ_METHODS, response_model=StockSummary)
async def stock_summary(products: ProductStore = Depends(get_product_store)):
    return products.stock_summary()


@router.api_route("/alerts/lowstockcount", methods=READ_METHODS, response_model=LowStockCountResponse)
async def low_stock_count(products: ProductStore = Depends(get_product_store)):
    """Number of products at or below their minimum stock."""
    return LowStockCountResponse(count=products.low_stock_count())


@router.api_route("/alerts/lowstock", methods=READ_METHODS, response_model=List[ProductResponse])
async def low_stock_alerts(products: ProductStore = Depends(get_product_store)):
    """Products at or below their minimum stock."""
    return [ProductResponse.model_validate(p) for p in products.low_stock_alerts()]
