"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from enum import Enum

from vending.domain.exceptions import ValidationError

# Amounts closer than this are considered equal.
TOLERANCE = Decimal("1e-10")

_ZERO = Decimal("0")


class Comparison(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, eq=False)
class Money:
    """Monetary amount as a fixed-precision decimal.

    Equality and ordering are tolerance-based (see ``TOLERANCE``), so
    Money is unhashable. Amounts may be negative: the
    domain never floors a subtraction at zero.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")

    # --- Named operations -----------------------------------------------------

    def compare(self, other: Money) -> Comparison:
        diff = self.amount - other.amount
        if abs(diff) < TOLERANCE:
            return Comparison.EQUAL
        return Comparison.LESS if diff < _ZERO else Comparison.GREATER

    def subtract(self, other: Money) -> Money:
        return Money(self.amount - other.amount)

    def scale(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only scale Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def is_zero(self) -> bool:
        return self.compare(ZERO) is Comparison.EQUAL

    def decompose(self, denominations: Iterable[Money]) -> CoinBreakdown:
        """Greedily break this amount into coins of the given denominations.

        ``denominations`` must be positive and strictly descending. For
        each one, as many whole coins as fit are taken from the running
        remainder; a remainder tolerance-equal to the coin is taken as a
        final coin and zeroes the remainder.

        Returns the empty breakdown when the amount cannot be expressed
        exactly. Greedy is only optimal for canonical coin systems.
        """
        coins_in = _validate_denominations(denominations)

        remainder = self
        coins: list[CoinCount] = []
        for coin in coins_in:
            count = 0
            if remainder.compare(ZERO) is Comparison.GREATER:
                count, remainder = _divmod(remainder, coin)
                if remainder.compare(coin) is Comparison.EQUAL:
                    count += 1
                    remainder = ZERO
            coins.append(CoinCount(coin, count))

        if not remainder.is_zero():
            return CoinBreakdown(())
        return CoinBreakdown(tuple(coins))

    # --- Operators --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Comparison.EQUAL

    __hash__ = None  # type: ignore[assignment]

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return self.scale(factor)

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Comparison.LESS

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is not Comparison.GREATER

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Comparison.GREATER

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is not Comparison.LESS

    # --- Display --------------------------------------------------------------

    def format(self) -> str:
        return f"{self.amount:.2f}"

    def __str__(self) -> str:
        return self.format()

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


ZERO = Money(_ZERO)


def _divmod(amount: Money, coin: Money) -> tuple[int, Money]:
    """Whole coins that fit in a positive ``amount``, and what is left."""
    # Enough digits for the whole quotient, so the remainder stays exact.
    digits = amount.amount.adjusted() - coin.amount.adjusted() + 1
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + ctx.prec)
        whole, rest = divmod(amount.amount, coin.amount)
    return int(whole), Money(rest)


def _validate_denominations(denominations: Iterable[Money]) -> list[Money]:
    coins = list(denominations)
    if not coins:
        raise ValidationError("At least one denomination is required")
    for coin in coins:
        if not isinstance(coin, Money):
            raise ValidationError(
                f"Denomination must be Money, got {type(coin).__name__}"
            )
        if coin.compare(ZERO) is not Comparison.GREATER:
            raise ValidationError(f"Denomination must be positive, got {coin}")
    for larger, smaller in zip(coins, coins[1:]):
        if smaller.compare(larger) is not Comparison.LESS:
            raise ValidationError(
                "Denominations must be strictly descending "
                f"({smaller} follows {larger})"
            )
    return coins


@dataclass(frozen=True)
class CoinCount:
    """How many coins of one denomination make up part of an amount."""

    denomination: Money
    count: int

    @property
    def value(self) -> Money:
        return self.denomination.scale(self.count)

    def format(self) -> str:
        return f"{{{self.count}x,{self.denomination.format()}}}"


@dataclass(frozen=True)
class CoinBreakdown:
    """Result of ``Money.decompose``.

    Holds one entry per denomination, in the order the denominations
    were given, zero counts included. The empty breakdown means the
    amount could not be expressed exactly.
    """

    coins: tuple[CoinCount, ...]

    @property
    def is_exact(self) -> bool:
        return bool(self.coins)

    def nonzero(self) -> tuple[CoinCount, ...]:
        return tuple(c for c in self.coins if c.count > 0)

    def total(self) -> Money:
        result = ZERO
        for coin in self.coins:
            result = Money(result.amount + coin.value.amount)
        return result

    def format(self) -> str:
        return ",".join(c.format() for c in self.nonzero())

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Item:
    """Identifies a product. Lookup compares the name to a raw string."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValidationError(
                f"Item name must be a string, got {type(self.name).__name__}"
            )

    def matches(self, identifier: str) -> bool:
        return self.name == identifier

    def format(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name
