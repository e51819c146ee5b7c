from fastapi import Request

from inventory_app.services.product_store import ProductStore
from inventory_app.services.user_store import UserStore

# GET routes also answer HEAD.
READ_METHODS = ["GET", "HEAD"]


def get_user_store(request: Request) -> UserStore:
    """User store attached to the running application."""
    return request.app.state.user_store


def get_product_store(request: Request) -> ProductStore:
    """Product store attached to the running application."""
    return request.app.state.product_store
