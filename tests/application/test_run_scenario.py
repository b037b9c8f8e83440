"""Integration tests for the RunScenario use case."""

import pytest

from vending.application.dto import PurchaseRequest, ScenarioSpec, SlotSpec
from vending.application.run_scenario import RunScenarioHandler
from vending.domain.exceptions import ValidationError

COINS = ["2.00", "1.00", "0.50", "0.20", "0.10"]


def _spec(requests: list[PurchaseRequest], balance: str = "12.60") -> ScenarioSpec:
    return ScenarioSpec(
        denominations=COINS,
        balance=balance,
        slots=[
            SlotSpec("Coca Cola", "2.00", 3),
            SlotSpec("Grape Soda", "1.50", 5),
            SlotSpec("Orange Soda", "1.30", 6),
            SlotSpec("Bottled Water", "1.20", 8),
            SlotSpec("Sapphire Martini", "13.00", 1),
        ],
        requests=requests,
    )


class TestRunScenarioHappyPath:

    def test_full_demo_run(self):
        report = RunScenarioHandler().handle(_spec([
            PurchaseRequest("Coca Cola", 2),
            PurchaseRequest("Orange Soda", 2),
            PurchaseRequest("Bottled Water", 1),
            PurchaseRequest("Sapphire Martini", 1),
        ]))

        assert report.machine_before == (
            "{3x,Coca Cola,2.00$},{5x,Grape Soda,1.50$},{6x,Orange Soda,1.30$},"
            "{8x,Bottled Water,1.20$},{1x,Sapphire Martini,13.00$}"
        )
        assert report.balance_before.amount == "12.60"
        assert report.balance_before.coins == "{6x,2.00},{1x,0.50},{1x,0.10}"

        assert [p.succeeded for p in report.purchases] == [True, True, True, False]
        assert [p.balance for p in report.purchases] == ["8.60", "6.00", "4.80", "4.80"]
        assert report.purchases[0].item_name == "Coca Cola"
        assert report.purchases[3].status == "INSUFFICIENT_FUNDS"
        assert report.purchases[3].item_name is None

        assert report.machine_after == (
            "{1x,Coca Cola,2.00$},{5x,Grape Soda,1.50$},{4x,Orange Soda,1.30$},"
            "{7x,Bottled Water,1.20$},{1x,Sapphire Martini,13.00$}"
        )
        assert report.balance_after.amount == "4.80"
        assert report.balance_after.exact
        assert report.balance_after.coins == "{2x,2.00},{1x,0.50},{1x,0.20},{1x,0.10}"

    def test_no_requests(self):
        report = RunScenarioHandler().handle(_spec([]))
        assert report.purchases == []
        assert report.machine_after == report.machine_before
        assert report.balance_after == report.balance_before


class TestRunScenarioRejections:

    def test_unknown_item_reported(self):
        report = RunScenarioHandler().handle(_spec([PurchaseRequest("Lemonade", 1)]))
        line = report.purchases[0]
        assert line.status == "NOT_FOUND"
        assert line.balance == "12.60"

    def test_sold_out_reported(self):
        report = RunScenarioHandler().handle(_spec([
            PurchaseRequest("Sapphire Martini", 1),
            PurchaseRequest("Sapphire Martini", 1),
        ], balance="30.00"))
        assert [p.status for p in report.purchases] == ["SUCCESS", "INSUFFICIENT_STOCK"]

    def test_undecomposable_balance_reported(self):
        report = RunScenarioHandler().handle(_spec([], balance="12.65"))
        assert not report.balance_before.exact
        assert report.balance_before.coins == ""

    def test_invalid_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            RunScenarioHandler().handle(_spec([PurchaseRequest("Coca Cola", -2)]))

    def test_invalid_balance_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            RunScenarioHandler().handle(_spec([], balance="lots"))
