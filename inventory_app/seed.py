"""Fixed records loaded into fresh stores at startup."""
import logging

from inventory_app.schemas.product import ProductCreate
from inventory_app.services.product_store import ProductStore
from inventory_app.services.user_store import UserStore

logger = logging.getLogger(__name__)

SEED_USERS = [
    {
        "email": "ethan.carter@gmail.com",
        "password": "password123",
        "name": "Ethan Carter",
    },
]

SEED_PRODUCTS = [
    {
        "productName": "Apple AirTag",
        "sku": "SKU-AIRTAG-001",
        "description": "Bluetooth tracker",
        "category": "Electronics",
        "availableQty": 42,
        "unit": "pcs",
        "cost": 2200,
        "mrp": 2990,
        "notes": "Latest batch",
        "supplier": "Apple Inc.",
        "location": "Aisle 3",
        "minStock": 10,
    },
    {
        "productName": "Logitech MX Keys",
        "sku": "SKU-LOGI-MXK",
        "description": "Wireless keyboard",
        "category": "Electronics",
        "availableQty": 12,
        "unit": "pcs",
        "cost": 8500,
        "mrp": 9990,
        "notes": "Needs accessories section update",
        "supplier": "Logitech",
        "location": "Aisle 4",
        "minStock": 8,
    },
    {
        "productName": "Standing Desk",
        "sku": "SKU-DESK-STD",
        "description": "Height adjustable desk",
        "category": "Furniture",
        "availableQty": 4,
        "unit": "pcs",
        "cost": 18000,
        "mrp": 21999,
        "notes": "New inventory",
        "supplier": "FlexiDesk",
        "location": "Warehouse",
        "minStock": 5,
    },
]


def seed_users(user_store: UserStore) -> None:
    """Register the seed accounts that are not already present."""
    for entry in SEED_USERS:
        if user_store.get(entry["email"]) is None:
            user_store.register(**entry)
    logger.info("Seeded users, %d account(s) in store", len(user_store))


def seed_products(product_store: ProductStore) -> None:
    """Create the seed products whose SKU is not already taken."""
    for entry in SEED_PRODUCTS:
        if product_store.get_by_sku(entry["sku"]) is None:
            product_store.create(ProductCreate.model_validate(entry))
    logger.info("Seeded products, %d product(s) in store", len(product_store))

