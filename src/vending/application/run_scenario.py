"""Application service: Run Scenario use case.

Loads a fresh Machine, then plays every purchase request against the
customer's balance, carrying the remaining balance from one request to
the next. Rejected requests leave the balance as it was.
"""

from __future__ import annotations

import logging

from vending.application.dto import PurchaseLineDTO, ScenarioReportDTO, ScenarioSpec
from vending.application.make_change import MakeChangeHandler
from vending.domain.model.machine import Machine, PurchaseResult
from vending.domain.model.value_objects import Item, Money

logger = logging.getLogger(__name__)


class RunScenarioHandler:

    def handle(self, spec: ScenarioSpec) -> ScenarioReportDTO:
        coins = [Money.of(d) for d in spec.denominations]
        balance = Money.of(spec.balance)

        machine = Machine()
        machine.fill(
            items=[Item(s.name) for s in spec.slots],
            prices=[Money.of(s.price) for s in spec.slots],
            counts=[s.stock for s in spec.slots],
        )
        logger.info(
            "Running %d purchase request(s) against %d slot(s)",
            len(spec.requests),
            len(machine.slots),
        )

        machine_before = machine.format()
        balance_before = MakeChangeHandler.describe(balance, coins)

        lines: list[PurchaseLineDTO] = []
        for request in spec.requests:
            result = machine.purchase(request.selector, request.quantity, balance)
            balance = result.balance
            lines.append(self._to_dto(result))

        return ScenarioReportDTO(
            machine_before=machine_before,
            balance_before=balance_before,
            purchases=lines,
            machine_after=machine.format(),
            balance_after=MakeChangeHandler.describe(balance, coins),
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(result: PurchaseResult) -> PurchaseLineDTO:
        return PurchaseLineDTO(
            selector=result.selector,
            quantity=result.quantity,
            status=result.status.value,
            succeeded=result.succeeded,
            item_name=result.item.name if result.item is not None else None,
            balance=result.balance.format(),
        )
