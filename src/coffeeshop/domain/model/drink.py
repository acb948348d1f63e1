"""Beverages.

Coffee drinks form a closed family: only Americano, Latte and Macchiato
may extend ``CoffeeDrink``. Tea is a beverage that sits
outside that family. Beverages are not priced and never reach the food
receipt.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum

from coffeeshop.domain.exceptions import InvalidInputError
from coffeeshop.domain.model.item import Item


class Temperature(Enum):
    HOT = "Hot"
    ICED = "Iced"


class MilkType(Enum):
    WHOLE = "Whole"
    SKIM = "Skim"
    ALMOND = "Almond"
    OAT = "Oat"
    SOY = "Soy"
    COCONUT = "Coconut"


class Beverage(Item):
    """A drink in the order."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable name, e.g. ``Hot Americano``."""


# Only these classes, defined in this module, may extend CoffeeDrink.
_COFFEE_DRINKS = frozenset({"Americano", "Latte", "Macchiato"})


class CoffeeDrink(Beverage):
    """Espresso based drinks served hot or iced."""

    temperature: Temperature

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _COFFEE_DRINKS:
            raise TypeError(
                f"{cls.__qualname__} is not a permitted coffee drink; "
                f"expected one of {', '.join(sorted(_COFFEE_DRINKS))}"
            )


def _check_enum(value, enum_cls: type[Enum], field_name: str) -> None:
    if not isinstance(value, enum_cls):
        raise InvalidInputError(
            f"{field_name} must be a {enum_cls.__name__}, got {value!r}"
        )


def _check_flavor(flavor: str | None) -> str | None:
    if flavor is None:
        return None
    if not isinstance(flavor, str):
        raise InvalidInputError(f"Flavor must be text, got {flavor!r}")
    return flavor.strip() or None


@dataclass(frozen=True)
class Americano(CoffeeDrink):
    temperature: Temperature = Temperature.HOT

    def __post_init__(self) -> None:
        _check_enum(self.temperature, Temperature, "Temperature")

    @property
    def description(self) -> str:
        return f"{self.temperature.value} Americano"


@dataclass(frozen=True)
class Latte(CoffeeDrink):
    flavor: str | None = None
    milk: MilkType = MilkType.WHOLE
    temperature: Temperature = Temperature.HOT

    def __post_init__(self) -> None:
        object.__setattr__(self, "flavor", _check_flavor(self.flavor))
        _check_enum(self.milk, MilkType, "Milk")
        _check_enum(self.temperature, Temperature, "Temperature")

    @property
    def description(self) -> str:
        return _milk_drink_description(self.temperature, self.flavor, "Latte", self.milk)


@dataclass(frozen=True)
class Macchiato(CoffeeDrink):
    flavor: str | None = None
    milk: MilkType = MilkType.WHOLE
    temperature: Temperature = Temperature.HOT

    def __post_init__(self) -> None:
        object.__setattr__(self, "flavor", _check_flavor(self.flavor))
        _check_enum(self.milk, MilkType, "Milk")
        _check_enum(self.temperature, Temperature, "Temperature")

    @property
    def description(self) -> str:
        return _milk_drink_description(self.temperature, self.flavor, "Macchiato", self.milk)


@dataclass(frozen=True)
class Tea(Beverage):
    tea_type: str

    def __post_init__(self) -> None:
        if not isinstance(self.tea_type, str) or not self.tea_type.strip():
            raise InvalidInputError("Tea type is required")
        object.__setattr__(self, "tea_type", self.tea_type.strip())

    @property
    def description(self) -> str:
        return f"{self.tea_type} Tea"


def _milk_drink_description(
    temperature: Temperature,
    flavor: str | None,
    name: str,
    milk: MilkType,
) -> str:
    words = [temperature.value]
    if flavor:
        words.append(flavor)
    words.append(name)
    return f"{' '.join(words)} with {milk.value} Milk"
