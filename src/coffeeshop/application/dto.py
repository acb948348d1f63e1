"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: one requested item, e.g. kind ``bagel`` with its raw fields."""

    kind: str
    fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: everything printed for an order."""

    customer_name: str
    receipt: str
    food_items: list[str]
    drinks: list[str]
