"""Registry of commodity items tracked by the price survey.

Each item owns up to three columns in the wide export: its price, how it was
purchased, and the type of shop it was bought from. The survey form does not
ask every question for every item, so some columns are simply absent (no
purchase option for Eggplant, Onion and Green Chilli, no shop type for Eggs).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from pricesurvey.core.errors import UnknownItemError


@dataclass(frozen=True)
class ItemCategory:
    """A commodity item and the wide-table columns that describe it."""

    name: str
    code: int
    value_column: Optional[str]
    purchase_option_column: Optional[str] = None
    shop_type_column: Optional[str] = None

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(
            column
            for column in (self.value_column, self.purchase_option_column, self.shop_type_column)
            if column
        )


ITEM_CATEGORIES: Tuple[ItemCategory, ...] = (
    ItemCategory("Rice", 1, "Value - Rice", "Rice Purchase Options", "Type of Shop for Rice"),
    ItemCategory("Flour", 2, "Value - Flour", "Flour Purchase Options", "Type of Shop for Flour"),
    ItemCategory("Lentil", 3, "Value - Lentil", "Lentils Purchase Options", "Type of Shop for Lentils"),
    ItemCategory(
        "Soybean Oil",
        4,
        "Value - Soybean Oil",
        "Soybean Oil Purchase Options",
        "Type of Shop for Soybean Oil",
    ),
    ItemCategory("Salt", 5, "Value - Salt", "Salt Purchase Options", "Type of Shop for Salt"),
    ItemCategory("Sugar", 6, "Value - Sugar", "Sugar Purchase Options", "Type of Shop for Sugar"),
    ItemCategory("Eggs", 7, "Value - Eggs", "Eggs Purchase Options", None),
    ItemCategory("Chicken", 8, "Value - Chicken", "Chicken Purchase Options", "Type of Shop for Chicken"),
    ItemCategory("Potato", 9, "Value - Potato", "Potato Purchase Options", "Type of Shop for Potato"),
    ItemCategory("Eggplant", 10, "Value - Eggplant", None, "Type of Shop for Eggplant"),
    ItemCategory("Onion", 11, "Value - Onion", None, "Type of Shop for Onion"),
    ItemCategory("Green Chilli", 12, "Value - Green Chilli", None, "Type of Shop for Green Chilli"),
)

UNMATCHED_CODE = 0

_BY_NAME: Dict[str, ItemCategory] = {category.name: category for category in ITEM_CATEGORIES}
_BY_CODE: Dict[int, ItemCategory] = {category.code: category for category in ITEM_CATEGORIES}


def category_by_name(name: str) -> Optional[ItemCategory]:
    """Return the category whose name matches ``name`` exactly, if any."""

    return _BY_NAME.get(name)


def category_by_code(code: int) -> Optional[ItemCategory]:
    return _BY_CODE.get(code)


def select_categories(names: Iterable[str] | None) -> Tuple[ItemCategory, ...]:
    """Restrict the registry to the given item names, keeping code order.

    ``None`` or an empty selection returns the full registry.
    """

    requested = [name.strip() for name in names or [] if name and name.strip()]
    if not requested:
        return ITEM_CATEGORIES

    for name in requested:
        if name not in _BY_NAME:
            raise UnknownItemError(name)
    wanted = set(requested)
    return tuple(category for category in ITEM_CATEGORIES if category.name in wanted)


def category_columns(categories: Iterable[ItemCategory]) -> List[str]:
    """List every item-specific column the given categories read, without repeats."""

    columns: List[str] = []
    for category in categories:
        for column in category.columns:
            if column not in columns:
                columns.append(column)
    return columns
