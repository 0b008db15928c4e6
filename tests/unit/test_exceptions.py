from nexus_kernel.error_codes import ERROR_CODES, http_status_for, message_for
from nexus_kernel.exceptions import (
    ConflictError,
    CurrencyMismatchError,
    DomainError,
    InvalidValueError,
    NotFoundError,
    TransactionStateError,
    ValidationError,
)


def test_default_codes():
    assert InvalidValueError("bad").code == "invalid_input"
    assert NotFoundError().code == "not_found"
    assert ConflictError().code == "conflict"
    assert TransactionStateError().code == "transaction_error"


def test_code_override_and_payload():
    exc = NotFoundError("user not found", code="user_not_found", details={"id": "1"})
    assert str(exc) == "[user_not_found] user not found"
    assert exc.to_payload() == {"code": "user_not_found", "message": "user not found", "details": {"id": "1"}}


def test_message_defaults_to_class_name():
    assert ConflictError().message == "ConflictError"


def test_currency_mismatch_is_a_validation_error():
    exc = CurrencyMismatchError("BRL", "USD", "add")
    assert isinstance(exc, ValidationError)
    assert isinstance(exc, DomainError)
    assert exc.details == {"currencies": ["BRL", "USD"]}


def test_every_domain_code_is_registered():
    for cls in (ValidationError, InvalidValueError, CurrencyMismatchError, NotFoundError, ConflictError):
        assert cls.code in ERROR_CODES


def test_lookup_helpers():
    assert http_status_for("currency_mismatch") == 400
    assert http_status_for("nope") == 500
    assert message_for("not_found") == "Resource not found."
    assert message_for("nope") == "nope"
