"""Machine aggregate: slots of stocked products and the purchase rule.

The Machine owns its Slots. Stock only ever goes down, and only
through a successful purchase.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from vending.domain.exceptions import ValidationError
from vending.domain.model.value_objects import Comparison, Item, Money

logger = logging.getLogger(__name__)


class PurchaseStatus(Enum):
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of ``Machine.purchase``.

    ``balance`` is what the customer has left after the attempt; on any
    failure it is the balance that was passed in. ``item`` is only set
    on success.
    """

    status: PurchaseStatus
    selector: str
    quantity: int
    balance: Money
    item: Item | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is PurchaseStatus.SUCCESS


@dataclass
class Slot:
    """A product bay: one item, its unit price and the remaining stock.

    Invariant: ``stock`` is never negative. It is checked on every
    assignment, not only at construction.
    """

    item: Item
    price: Money
    stock: int

    def __post_init__(self) -> None:
        if not isinstance(self.item, Item):
            raise ValidationError(f"Slot item must be an Item, got {type(self.item).__name__}")
        if not isinstance(self.price, Money):
            raise ValidationError(f"Slot price must be Money, got {type(self.price).__name__}")

    def __setattr__(self, name: str, value: object) -> None:
        if name == "stock":
            self._check_stock(value)
        super().__setattr__(name, value)

    @staticmethod
    def _check_stock(value: object) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ValidationError(f"Stock cannot be negative, got {value}")

    def total_price(self, count: int) -> Money:
        return self.price.scale(count)

    def dispense(self, count: int) -> None:
        """Take ``count`` units out of the slot."""
        if count <= 0:
            raise ValidationError("Dispense count must be positive")
        if count > self.stock:
            raise ValidationError(
                f"Cannot dispense {count} of {self.item} "
                f"(only {self.stock} in stock)"
            )
        self.stock -= count

    def format(self) -> str:
        return f"{{{self.stock}x,{self.item.format()},{self.price.format()}$}}"


class Machine:
    """Aggregate root: an ordered list of slots.

    Item names need not be unique across slots, but lookup stops at the
    first match, so a later slot with the same item is never sold from.
    """

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(self._slots)

    # --- Loading --------------------------------------------------------------

    def load(self, item: Item, price: Money, count: int) -> Slot:
        """Append one slot."""
        slot = Slot(item=item, price=price, stock=count)
        self._slots.append(slot)
        logger.debug("Loaded slot %s", slot.format())
        return slot

    def fill(
        self,
        items: Sequence[Item],
        prices: Sequence[Money],
        counts: Sequence[int],
    ) -> None:
        """Load one slot per position of three parallel sequences.

        The sequences must have the same length. Every slot is validated
        before any is appended, so a bad entry loads nothing.
        """
        if not len(items) == len(prices) == len(counts):
            raise ValidationError(
                "Fill sequences must have equal lengths "
                f"(items={len(items)}, prices={len(prices)}, counts={len(counts)})"
            )
        slots = [
            Slot(item=item, price=price, stock=count)
            for item, price, count in zip(items, prices, counts)
        ]
        self._slots.extend(slots)
        logger.debug("Filled %d slots", len(slots))

    # --- Queries --------------------------------------------------------------

    def find(self, selector: str) -> Slot | None:
        """Return the first slot whose item matches, or None."""
        for slot in self._slots:
            if slot.item.matches(selector):
                return slot
        return None

    # --- Purchase -------------------------------------------------------------

    def purchase(self, selector: str, count: int, balance: Money) -> PurchaseResult:
        """Buy ``count`` units of the first slot matching ``selector``.

        The sale is attempted only on that first match. It succeeds when
        the slot holds at least ``count`` units and ``balance`` covers
        ``count`` times the unit price; the price is then subtracted from
        the balance once per unit. On failure neither stock nor balance
        changes and the status says why.
        """
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValidationError(
                f"Purchase count must be an integer, got {type(count).__name__}"
            )
        if count <= 0:
            raise ValidationError("Purchase count must be positive")

        slot = self.find(selector)
        if slot is None:
            return self._reject(PurchaseStatus.NOT_FOUND, selector, count, balance)
        if count > slot.stock:
            return self._reject(PurchaseStatus.INSUFFICIENT_STOCK, selector, count, balance)
        if balance.compare(slot.total_price(count)) is Comparison.LESS:
            return self._reject(PurchaseStatus.INSUFFICIENT_FUNDS, selector, count, balance)

        slot.dispense(count)
        remaining = balance
        for _ in range(count):
            remaining = remaining.subtract(slot.price)

        logger.info(
            "Sold %dx %s, balance %s -> %s", count, slot.item, balance, remaining
        )
        return PurchaseResult(
            status=PurchaseStatus.SUCCESS,
            selector=selector,
            quantity=count,
            balance=remaining,
            item=slot.item,
        )

    @staticmethod
    def _reject(
        status: PurchaseStatus, selector: str, count: int, balance: Money
    ) -> PurchaseResult:
        logger.info("Rejected %dx %s: %s", count, selector, status.value)
        return PurchaseResult(
            status=status, selector=selector, quantity=count, balance=balance
        )

    # --- Display --------------------------------------------------------------

    def format(self) -> str:
        return ",".join(slot.format() for slot in self._slots)

    def __str__(self) -> str:
        return self.format()
