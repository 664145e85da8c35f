"""Error Hierarchy — typed, categorized exceptions for every inventory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - to_response() produces the REST envelope {error, message, code}
    - `error` carries the underlying error text, `message` a fixed operation description
    - Validation (400), authentication (401) and not-found (404) errors are the only
      non-500 kinds; everything raised by storage surfaces as 500

Design Decisions:
    - Single hierarchy with InventoryError base: one FastAPI handler catches all
    - description is attached by the route layer (operation wording belongs to the handler,
      not to the repository that raised the error)
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class InventoryError(Exception):
    """Base exception for all inventory service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        description: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.description = description

    def to_response(self, description: str | None = None) -> dict:
        """Convert to the standard REST error envelope."""
        return {
            "error": self.message,
            "message": description or self.description or _DEFAULT_DESCRIPTIONS[self.category],
            "code": self.http_status,
        }


_DEFAULT_DESCRIPTIONS = {
    ErrorCategory.VALIDATION: "Invalid request",
    ErrorCategory.AUTHENTICATION: "Authentication failed",
    ErrorCategory.RESOURCE_NOT_FOUND: "Resource not found",
    ErrorCategory.DATABASE: "Database operation failed",
    ErrorCategory.INTERNAL: "Internal server error",
}


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(InventoryError):
    """Request input could not be accepted."""
    def __init__(self, message: str, field: str | None = None, description: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400, description,
        )
        self.field = field


class AuthenticationFailed(InventoryError):
    """Credentials did not match a known user."""
    def __init__(self, message: str = "invalid credentials"):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION, 401,
            "Invalid credentials",
        )


class ResourceNotFoundError(InventoryError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Server Errors (500-level) ──────────────────────────────────

class DatabaseError(InventoryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation


class ServiceOperationError(InventoryError):
    """A service operation failed because of a collaborator; wraps the cause text."""
    def __init__(self, message: str):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL, 500,
        )


class IdentityGenerationError(InventoryError):
    """The cryptographic random source could not produce an identifier."""
    def __init__(self, reason: str):
        super().__init__(
            f"identity generation failed: {reason}",
            "IDENTITY_GENERATION_FAILED", ErrorCategory.INTERNAL, 500,
        )
