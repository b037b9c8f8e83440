"""Application service: Make Change use case (query)."""

from __future__ import annotations

from collections.abc import Sequence

from vending.application.dto import ChangeDTO
from vending.domain.model.value_objects import Money


class MakeChangeHandler:

    def handle(self, amount: str, denominations: Sequence[str]) -> ChangeDTO:
        """Break ``amount`` into coins of the given denominations."""
        return self.describe(Money.of(amount), [Money.of(d) for d in denominations])

    @staticmethod
    def describe(amount: Money, coins: Sequence[Money]) -> ChangeDTO:
        breakdown = amount.decompose(coins)
        return ChangeDTO(
            amount=amount.format(),
            coins=breakdown.format(),
            exact=breakdown.is_exact,
        )
