from typing import Any, Dict, Optional


# ───────────────────────── Base & Domain Exceptions ─────────────────────────
class DomainError(Exception):
    """Base class for domain-level errors. Services raise these; only the transport layer maps them to status codes."""
    code: str = "domain_error"
    message: str
    details: Optional[Dict[str, Any]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        self.message = message or self.__class__.__name__
        self.details = details or None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"

    def to_payload(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


# ─────────────────────────── Validation ─────────────────────────────────────

class ValidationError(DomainError):
    code = "validation_error"


class InvalidValueError(ValidationError):
    """Raw input violates a format, range or checksum invariant of a value object."""
    code = "invalid_input"


class CurrencyMismatchError(ValidationError):
    code = "currency_mismatch"

    def __init__(self, left: str, right: str, operation: str = "combine") -> None:
        super().__init__(
            f"cannot {operation} different currencies: {left} and {right}",
            details={"currencies": [left, right]},
        )
        self.left = left
        self.right = right


# ─────────────────────────── Outcomes ───────────────────────────────────────

class NotFoundError(DomainError):
    # generic; set a specific code via constructor if needed (e.g., "user_not_found")
    code = "not_found"


class ConflictError(DomainError):
    code = "conflict"


class UnauthorizedError(DomainError):
    code = "unauthorized"


class ForbiddenError(DomainError):
    code = "forbidden"


# ─────────────────────────── Infrastructure ─────────────────────────────────

class TransactionError(DomainError):
    """The transaction mechanism itself failed (not the wrapped operation)."""
    code = "transaction_error"


class TransactionStateError(TransactionError):
    pass


class InternalError(DomainError):
    code = "internal_error"
