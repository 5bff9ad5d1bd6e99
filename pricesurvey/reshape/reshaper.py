"""Reshape the wide survey export into one row per (submission, item)."""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from pricesurvey.core.errors import SchemaError
from pricesurvey.core.models import (
    DISTRICT,
    ITEMS_CHOSEN,
    REQUIRED_COLUMNS,
    SUBMISSION_ID,
    SUBMISSION_TIME,
    UPAZILA,
    USER_ID,
    NormalizedRecord,
    RawRecord,
)
from pricesurvey.reshape.categories import (
    ITEM_CATEGORIES,
    UNMATCHED_CODE,
    ItemCategory,
    category_columns,
)
from pricesurvey.reshape.expand import separate_rows

logger = logging.getLogger(__name__)

MISSING_PRICE_TOKEN = "NA"
_INTEGER_ID = re.compile(r"^[+-]?\d+$")

ProgressCallback = Callable[[int], None]


def parse_price(raw: Any) -> Optional[float]:
    """Return the price as a float, or ``None`` when it is missing or invalid.

    Blank cells, the literal ``NA`` and anything that is not a finite number
    all count as missing.
    """

    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
        return value if math.isfinite(value) else None

    text = str(raw).strip()
    if not text or text == MISSING_PRICE_TOKEN:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def check_schema(columns: Iterable[str]) -> None:
    """Raise ``SchemaError`` listing every required column absent from ``columns``."""

    present = set(columns)
    missing = [column for column in REQUIRED_COLUMNS if column not in present]
    if missing:
        raise SchemaError(missing)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _project(row: RawRecord, projection: Sequence[str]) -> Dict[str, Any]:
    """Keep only the columns the reshape reads; absent item columns become ``None``."""

    missing = [column for column in REQUIRED_COLUMNS if column not in row]
    if missing:
        raise SchemaError(missing)
    return {column: row.get(column) for column in projection}


def resolve_item(row: Mapping[str, Any], lookup: Mapping[str, ItemCategory]) -> NormalizedRecord:
    """Turn a single-token row into a record using its category's columns."""

    token = _text(row[ITEMS_CHOSEN])
    category = lookup.get(token)

    code = UNMATCHED_CODE
    price = purchase_option = shop_type = None
    if category is not None:
        code = category.code
        if category.value_column:
            price = parse_price(row.get(category.value_column))
        if category.purchase_option_column:
            purchase_option = _optional_text(row.get(category.purchase_option_column))
        if category.shop_type_column:
            shop_type = _optional_text(row.get(category.shop_type_column))

    return NormalizedRecord(
        submission_id=_text(row[SUBMISSION_ID]),
        user_id=_text(row[USER_ID]),
        submission_time=_text(row[SUBMISSION_TIME]),
        district=_text(row[DISTRICT]),
        upazila=_text(row[UPAZILA]),
        item_name=token,
        item_code=code,
        price=price,
        purchase_option=purchase_option,
        shop_type=shop_type,
    )


def _dedup_key(row: Mapping[str, Any], lookup: Mapping[str, ItemCategory]) -> tuple:
    """Identity columns, the token, and the matched item's own columns.

    Other items' columns are left out, so two rows that only differ in an
    unrelated item's price collapse into one.
    """

    token = _text(row[ITEMS_CHOSEN])
    category = lookup.get(token)
    item_columns = category.columns if category is not None else ()
    return tuple(row.get(column) for column in REQUIRED_COLUMNS + item_columns)


def _submission_sort_key(records: Sequence[NormalizedRecord]) -> Callable[[NormalizedRecord], tuple]:
    """Compare ids numerically when they are all integers, else as text."""

    if records and all(_INTEGER_ID.match(record.submission_id.strip()) for record in records):
        return lambda record: (int(record.submission_id.strip()), record.item_code)
    return lambda record: (record.submission_id, record.item_code)


def reshape(
    rows: Iterable[RawRecord],
    *,
    columns: Optional[Sequence[str]] = None,
    categories: Sequence[ItemCategory] = ITEM_CATEGORIES,
    deduplicate: bool = False,
    progress_callback: Optional[ProgressCallback] = None,
) -> List[NormalizedRecord]:
    """Reshape wide survey rows into ordered, price-bearing long records.

    ``columns`` is the source header; when omitted the keys of the first row
    are used. A missing identity column or ``Items to Choose`` raises
    ``SchemaError`` before anything is returned. Tokens that match no
    category and rows without a usable price are dropped silently.
    ``progress_callback`` receives the number of input rows processed so far.
    """

    rows = iter(rows)
    first: Optional[RawRecord] = None
    if columns is None:
        first = next(rows, None)
        if first is None:
            return []
        columns = list(first.keys())
    check_schema(columns)

    projection = list(REQUIRED_COLUMNS) + [
        column for column in category_columns(categories) if column not in REQUIRED_COLUMNS
    ]
    present = set(columns)
    absent = [column for column in projection if column not in present]
    if absent:
        logger.debug("Item columns absent from input, treated as empty: %s", ", ".join(absent))

    lookup = {category.name: category for category in categories}
    seen: set = set()
    candidates: List[NormalizedRecord] = []
    raw_count = 0
    duplicates = 0

    def _source() -> Iterable[RawRecord]:
        if first is not None:
            yield first
        yield from rows

    for raw_count, row in enumerate(_source(), start=1):
        projected = _project(row, projection)
        for expanded in separate_rows([projected], ITEMS_CHOSEN):
            if deduplicate:
                key = _dedup_key(expanded, lookup)
                if key in seen:
                    duplicates += 1
                    continue
                seen.add(key)
            candidates.append(resolve_item(expanded, lookup))
        if progress_callback is not None:
            progress_callback(raw_count)

    unmatched = sum(1 for record in candidates if record.item_code == UNMATCHED_CODE)
    kept = [record for record in candidates if record.price is not None]
    kept.sort(key=_submission_sort_key(kept))

    logger.info(
        "Reshaped %d rows into %d item rows (%d candidates, %d unmatched, %d without price, %d duplicates)",
        raw_count,
        len(kept),
        len(candidates),
        unmatched,
        len(candidates) - len(kept) - unmatched,
        duplicates,
    )
    return kept
