"""Wide-to-long reshaping of commodity price survey rows."""
from pricesurvey.reshape.categories import (
    ITEM_CATEGORIES,
    UNMATCHED_CODE,
    ItemCategory,
    category_by_code,
    category_by_name,
    category_columns,
    select_categories,
)
from pricesurvey.reshape.expand import separate_rows, split_tokens
from pricesurvey.reshape.reshaper import check_schema, parse_price, reshape, resolve_item

__all__ = [
    "ITEM_CATEGORIES",
    "UNMATCHED_CODE",
    "ItemCategory",
    "category_by_code",
    "category_by_name",
    "category_columns",
    "check_schema",
    "parse_price",
    "reshape",
    "resolve_item",
    "select_categories",
    "separate_rows",
    "split_tokens",
]
