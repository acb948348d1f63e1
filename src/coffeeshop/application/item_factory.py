"""Builds domain items from raw ``ItemSpec`` input.

Field layout per kind (optional fields in brackets):

    bagel:<bagel type>:<spread type>:<price>
    cookie:<cookie type>:<price>
    donut:<donut type>:<price>
    americano[:<temperature>]
    latte[:<flavor>[:<milk>[:<temperature>]]]
    macchiato[:<flavor>[:<milk>[:<temperature>]]]
    tea:<tea type>
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from coffeeshop.application.dto import ItemSpec
from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.drink import (
    Americano,
    Latte,
    Macchiato,
    MilkType,
    Tea,
    Temperature,
)
from coffeeshop.domain.model.item import Bagel, Cookie, Donut, Item

E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: type[E], raw: str) -> E:
    try:
        return enum_cls[raw.strip().upper()]
    except KeyError:
        choices = ", ".join(member.name for member in enum_cls)
        raise InvalidInputError(
            f"Unknown {enum_cls.__name__} '{raw}'. Expected one of: {choices}"
        ) from None


def _bagel(fields: tuple[str, ...]) -> Item:
    bagel_type, spread_type, price = fields
    return Bagel(bagel_type=bagel_type, spread_type=spread_type, price=price)


def _cookie(fields: tuple[str, ...]) -> Item:
    cookie_type, price = fields
    return Cookie(cookie_type=cookie_type, price=price)


def _donut(fields: tuple[str, ...]) -> Item:
    donut_type, price = fields
    return Donut(donut_type=donut_type, price=price)


def _americano(fields: tuple[str, ...]) -> Item:
    if fields:
        return Americano(temperature=_parse_enum(Temperature, fields[0]))
    return Americano()


def _milk_drink(drink_cls: type[Latte] | type[Macchiato]) -> Callable[[tuple[str, ...]], Item]:
    def build(fields: tuple[str, ...]) -> Item:
        kwargs: dict = {}
        if len(fields) > 0:
            kwargs["flavor"] = fields[0] or None
        if len(fields) > 1:
            kwargs["milk"] = _parse_enum(MilkType, fields[1])
        if len(fields) > 2:
            kwargs["temperature"] = _parse_enum(Temperature, fields[2])
        return drink_cls(**kwargs)

    return build


def _tea(fields: tuple[str, ...]) -> Item:
    (tea_type,) = fields
    return Tea(tea_type=tea_type)


# kind -> (builder, minimum field count, maximum field count)
_BUILDERS: dict[str, tuple[Callable[[tuple[str, ...]], Item], int, int]] = {
    "bagel": (_bagel, 3, 3),
    "cookie": (_cookie, 2, 2),
    "donut": (_donut, 2, 2),
    "americano": (_americano, 0, 1),
    "latte": (_milk_drink(Latte), 0, 3),
    "macchiato": (_milk_drink(Macchiato), 0, 3),
    "tea": (_tea, 1, 1),
}


def build_item(spec: ItemSpec) -> Item:
    """Turn one ``ItemSpec`` into the matching domain item."""
    kind = spec.kind.strip().lower()
    if kind not in _BUILDERS:
        raise InvalidInputError(
            f"Unknown item kind '{spec.kind}'. Expected one of: {', '.join(_BUILDERS)}"
        )

    builder, min_fields, max_fields = _BUILDERS[kind]
    fields = tuple(f.strip() for f in spec.fields)
    if not min_fields <= len(fields) <= max_fields:
        expected = str(min_fields) if min_fields == max_fields else f"{min_fields}-{max_fields}"
        raise InvalidInputError(
            f"'{kind}' takes {expected} field(s), got {len(fields)}"
        )
    return builder(fields)
