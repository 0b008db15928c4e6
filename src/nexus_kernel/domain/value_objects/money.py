"""Money value object."""
from __future__ import annotations

import re
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Iterator, Union

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import CurrencyMismatchError, InvalidValueError

Number = Union[int, float, Decimal, str]

_CURRENCY = re.compile(r"^[A-Z]{3}$")
_CENT = Decimal("0.01")

# symbol, thousands separator, decimal separator
_DISPLAY = {
    "BRL": ("R$ ", ".", ","),
    "EUR": ("€ ", ".", ","),
    "USD": ("US$ ", ",", "."),
    "GBP": ("£", ",", "."),
}


def _to_decimal(value: Number, what: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidValueError(f"invalid {what}: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidValueError(f"invalid {what}: {value!r}")
    if not result.is_finite():
        raise InvalidValueError(f"invalid {what}: {value!r}")
    return result


def _normalize_currency(currency: str) -> str:
    if not isinstance(currency, str):
        raise InvalidValueError("currency must be a string")
    code = currency.strip().upper()
    if not _CURRENCY.match(code):
        raise InvalidValueError(f"invalid currency code: {currency!r}")
    return code


@contextmanager
def _exact(cents: int) -> Iterator[None]:
    """Widen decimal precision so scaling `cents` never rounds before truncation."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(cents))) + 28)
        yield


class Money(BaseValueObject):
    """
    Amount of money held as integer minor units (cents) plus a currency code.

    Money(10.00, "BRL") converts major units exactly, rounding half-up to the
    cent. Arithmetic between two instances requires equal currencies; scaling
    by a scalar truncates toward zero.
    """

    def __init__(self, amount: Number, currency: str) -> None:
        major = _to_decimal(amount, "amount")
        try:
            rounded = major.quantize(_CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidValueError(f"amount out of range: {amount!r}")
        self.cents = int((rounded * 100).to_integral_value())
        self.currency = _normalize_currency(currency)
        self._finalize_init()

    @classmethod
    def from_cents(cls, cents: int, currency: str) -> Money:
        """Build from integer minor units exactly; no size limit."""
        if isinstance(cents, bool) or not isinstance(cents, int):
            raise InvalidValueError(f"cents must be an integer, got {cents!r}")
        money = cls.__new__(cls)
        money.cents = cents
        money.currency = _normalize_currency(currency)
        money._finalize_init()
        return money

    @classmethod
    def zero(cls, currency: str) -> Money:
        return cls.from_cents(0, currency)

    @property
    def amount(self) -> Decimal:
        """Amount in major units."""
        sign, digits, _ = Decimal(self.cents).as_tuple()
        return Decimal((sign, digits, -2))

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def formatted(self) -> str:
        """Localized display, e.g. R$ 1.234,56; unknown currencies fall back to str()."""
        display = _DISPLAY.get(self.currency)
        if display is None:
            return str(self)
        symbol, thousands, decimal_sep = display
        units, cents = divmod(abs(self.cents), 100)
        grouped = f"{units:,}".replace(",", thousands)
        sign = "-" if self.cents < 0 else ""
        return f"{sign}{symbol}{grouped}{decimal_sep}{cents:02d}"

    # ── arithmetic ──────────────────────────────────────────────────────────

    def add(self, other: Money) -> Money:
        """
        Raises:
            CurrencyMismatchError: If currencies differ
        """
        self._require_same_currency(other, "add")
        return Money.from_cents(self.cents + other.cents, self.currency)

    def subtract(self, other: Money) -> Money:
        """
        Raises:
            CurrencyMismatchError: If currencies differ
        """
        self._require_same_currency(other, "subtract")
        return Money.from_cents(self.cents - other.cents, self.currency)

    def multiply(self, factor: Number) -> Money:
        """Scale by factor, truncating toward zero."""
        with _exact(self.cents):
            product = Decimal(self.cents) * _to_decimal(factor, "factor")
        return Money.from_cents(int(product), self.currency)

    def divide(self, divisor: Number) -> Money:
        """
        Divide by divisor, truncating toward zero.

        Raises:
            InvalidValueError: If divisor is zero
        """
        value = _to_decimal(divisor, "divisor")
        if value == 0:
            raise InvalidValueError("cannot divide money by zero")
        with _exact(self.cents):
            quotient = Decimal(self.cents) / value
        return Money.from_cents(int(quotient), self.currency)

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    # ── comparison ──────────────────────────────────────────────────────────

    def __lt__(self, other: Money) -> bool:
        self._require_same_currency(other, "compare")
        return self.cents < other.cents

    def __le__(self, other: Money) -> bool:
        self._require_same_currency(other, "compare")
        return self.cents <= other.cents

    def __gt__(self, other: Money) -> bool:
        self._require_same_currency(other, "compare")
        return self.cents > other.cents

    def __ge__(self, other: Money) -> bool:
        self._require_same_currency(other, "compare")
        return self.cents >= other.cents

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_positive(self) -> bool:
        return self.cents > 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def negate(self) -> Money:
        return Money.from_cents(-self.cents, self.currency)

    def _require_same_currency(self, other: Money, operation: str) -> None:
        if not isinstance(other, Money):
            raise InvalidValueError(f"cannot {operation} Money with {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency, operation)
