# src/nexus_kernel/error_codes.py
# Central mapping between error codes and their transport representation.
# Keep keys stable: API clients rely on these.
ERROR_CODES = {
    # ─── Validation & Input ────────────────────────────────────────────────
    "validation_error": {
        "http": 400,
        "message": "Validation failed for one or more fields."
    },
    "invalid_input": {
        "http": 400,
        "message": "Invalid input data."
    },
    "currency_mismatch": {
        "http": 400,
        "message": "Operation between different currencies."
    },

    # ─── Authentication & Authorization ────────────────────────────────────
    "unauthorized": {
        "http": 401,
        "message": "Unauthorized access."
    },
    "forbidden": {
        "http": 403,
        "message": "Access forbidden."
    },

    # ─── Resources ─────────────────────────────────────────────────────────
    "not_found": {
        "http": 404,
        "message": "Resource not found."
    },
    "conflict": {
        "http": 409,
        "message": "Resource conflict."
    },

    # ─── Server ────────────────────────────────────────────────────────────
    "transaction_error": {
        "http": 500,
        "message": "Internal server error."
    },
    "internal_error": {
        "http": 500,
        "message": "Internal server error."
    },
}

DEFAULT_ERROR_CODE = "internal_error"


def http_status_for(code: str) -> int:
    """Return the HTTP status mapped to `code`; unknown codes map to 500."""
    entry = ERROR_CODES.get(code) or ERROR_CODES[DEFAULT_ERROR_CODE]
    return int(entry["http"])


def message_for(code: str) -> str:
    return str(ERROR_CODES.get(code, {}).get("message", code))
