"""
Domain exceptions raised by services and translated to HTTP responses
"""


class InventoryError(Exception):
    """Base class for errors that map to an HTTP status code"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(InventoryError):
    """Missing or invalid required input"""

    status_code = 400
    default_message = "Invalid input"


class AuthenticationError(InventoryError):
    """Missing, invalid or expired bearer token"""

    status_code = 401
    default_message = "Invalid token"


class InvalidCredentialsError(AuthenticationError):
    """Login with an unknown email or a wrong password"""

    status_code = 400
    default_message = "Invalid credentials"


class ConflictError(InventoryError):
    """A unique value is already taken"""

    status_code = 400
    default_message = "Already exists"


class NotFoundError(InventoryError):
    """Scoped lookup found no row in the caller's organization"""

    status_code = 404
    default_message = "Not found"


class StoreError(InventoryError):
    """Persistent store failure; details stay in the server log"""

    status_code = 500
    default_message = "Internal server error"
