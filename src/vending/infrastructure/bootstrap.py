"""Composition root: wires the scenario source to the application layer.

This is the only place that knows where scenario data comes from.
Without a scenario file the machine runs the built-in demo.
"""

from __future__ import annotations

from pathlib import Path

from vending.application.dto import PurchaseRequest, ScenarioSpec, SlotSpec
from vending.infrastructure.json_scenario_file import JsonScenarioFile

DEFAULT_DENOMINATIONS = ["2.00", "1.00", "0.50", "0.20", "0.10"]


def default_scenario() -> ScenarioSpec:
    return ScenarioSpec(
        denominations=list(DEFAULT_DENOMINATIONS),
        balance="12.60",
        slots=[
            SlotSpec("Coca Cola", "2.00", 3),
            SlotSpec("Grape Soda", "1.50", 5),
            SlotSpec("Orange Soda", "1.30", 6),
            SlotSpec("Bottled Water", "1.20", 8),
            SlotSpec("Sapphire Martini", "13.00", 1),
        ],
        requests=[
            PurchaseRequest("Coca Cola", 2),
            PurchaseRequest("Orange Soda", 2),
            PurchaseRequest("Bottled Water", 1),
            # Costs more than the remaining balance.
            PurchaseRequest("Sapphire Martini", 1),
        ],
    )


def scenario(path: Path | None = None) -> ScenarioSpec:
    if path is None:
        return default_scenario()
    return JsonScenarioFile(path, DEFAULT_DENOMINATIONS).load()
