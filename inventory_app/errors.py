"""Error taxonomy shared by the stores and rendered by the API layer."""


class InventoryError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """Required input is missing or empty."""

    status_code = 400


class AuthError(InventoryError):
    """Unknown user or wrong password."""

    status_code = 401


class NotFoundError(InventoryError):
    """No route matches the request."""

    status_code = 404

    @classmethod
    def for_route(cls, method: str, path: str) -> "NotFoundError":
        return cls(f"Route {method} {path} not found")


class ConflictError(InventoryError):
    """A unique key (email or SKU) is already taken."""

    status_code = 409
