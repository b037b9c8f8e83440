"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts arrive as
strings so callers never need to build Decimals themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SlotSpec:
    """Input: one slot to load (product name, unit price, stock)."""

    name: str
    price: str
    stock: int


@dataclass(frozen=True)
class PurchaseRequest:
    """Input: what the customer asked for (product name + quantity)."""

    selector: str
    quantity: int


@dataclass(frozen=True)
class ScenarioSpec:
    """Input: a whole run of the machine."""

    denominations: list[str]
    balance: str
    slots: list[SlotSpec]
    requests: list[PurchaseRequest]


@dataclass(frozen=True)
class PurchaseLineDTO:
    """Output: the outcome of a single purchase request."""

    selector: str
    quantity: int
    status: str
    succeeded: bool
    item_name: str | None
    balance: str  # formatted, e.g. "8.60"


@dataclass(frozen=True)
class ChangeDTO:
    """Output: an amount and its coin breakdown."""

    amount: str
    coins: str  # e.g. "{6x,2.00},{1x,0.50}"; empty when not exact
    exact: bool


@dataclass(frozen=True)
class ScenarioReportDTO:
    """Output: machine and balance before and after the purchases."""

    machine_before: str
    balance_before: ChangeDTO
    purchases: list[PurchaseLineDTO]
    machine_after: str
    balance_after: ChangeDTO
