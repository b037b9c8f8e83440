"""JSON-file-backed scenario source.

The file is read once and never written back. Expected shape::

    {
      "denominations": ["2.00", "1.00", "0.50"],
      "balance": "12.60",
      "slots": [{"name": "Cola", "price": "2.00", "stock": 3}],
      "requests": [{"selector": "Cola", "quantity": 2}]
    }

``denominations`` is optional and falls back to the coin set the
loader was built with.
"""

from __future__ import annotations

import json
from pathlib import Path

from vending.application.dto import PurchaseRequest, ScenarioSpec, SlotSpec
from vending.domain.exceptions import ValidationError


class JsonScenarioFile:

    def __init__(self, file_path: Path, default_denominations: list[str]) -> None:
        self._file_path = file_path
        self._default_denominations = default_denominations

    def load(self) -> ScenarioSpec:
        return self._to_spec(self._load_raw(), self._default_denominations)

    # --- Deserialization ------------------------------------------------------

    @classmethod
    def _to_spec(cls, raw: object, default_denominations: list[str]) -> ScenarioSpec:
        if not isinstance(raw, dict):
            raise ValidationError("Scenario must be a JSON object")
        try:
            return ScenarioSpec(
                denominations=[
                    cls._amount(d) for d in raw.get("denominations", default_denominations)
                ],
                balance=cls._amount(raw["balance"]),
                slots=[
                    SlotSpec(
                        name=cls._text(s["name"]),
                        price=cls._amount(s["price"]),
                        stock=cls._integer(s["stock"]),
                    )
                    for s in raw["slots"]
                ],
                requests=[
                    PurchaseRequest(
                        selector=cls._text(r["selector"]),
                        quantity=cls._integer(r["quantity"]),
                    )
                    for r in raw.get("requests", [])
                ],
            )
        except KeyError as exc:
            raise ValidationError(f"Scenario is missing required key {exc}") from exc
        except TypeError as exc:
            raise ValidationError(f"Malformed scenario: {exc}") from exc

    @staticmethod
    def _amount(value: object) -> str:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValidationError(f"Invalid amount in scenario: {value!r}")
        return str(value)

    @staticmethod
    def _integer(value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Expected an integer in scenario, got {value!r}")
        return value

    @staticmethod
    def _text(value: object) -> str:
        if not isinstance(value, str):
            raise ValidationError(f"Expected a string in scenario, got {value!r}")
        return value

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> object:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Scenario file {self._file_path} is not valid JSON: {exc}"
            ) from exc
        except (UnicodeDecodeError, OSError) as exc:
            raise ValidationError(
                f"Cannot read scenario file {self._file_path}: {exc}"
            ) from exc
