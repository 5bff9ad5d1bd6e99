"""Mapping utilities to lay normalized records out as output rows."""
from typing import Any, Dict, Iterable, List, Optional

from pricesurvey.core.models import NormalizedRecord


OUTPUT_HEADERS = [
    "SubmissionID",
    "UserID",
    "SubmissionTime",
    "District",
    "Upazila",
    "ItemName",
    "ItemCode",
    "Price",
    "PurchaseOption",
    "ShopType",
]


def format_price(value: Optional[float]) -> str:
    """Render ``50.0`` as ``50`` and keep other prices at full precision."""

    if value is None:
        return ""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def record_to_output_row(record: NormalizedRecord) -> Dict[str, Any]:
    """Convert a NormalizedRecord into an output dictionary keyed by header."""

    return {
        "SubmissionID": record.submission_id,
        "UserID": record.user_id,
        "SubmissionTime": record.submission_time,
        "District": record.district,
        "Upazila": record.upazila,
        "ItemName": record.item_name,
        "ItemCode": record.item_code,
        "Price": format_price(record.price),
        "PurchaseOption": record.purchase_option or "",
        "ShopType": record.shop_type or "",
    }


def records_to_output_rows(records: Iterable[NormalizedRecord]) -> List[Dict[str, Any]]:
    """Convert an iterable of NormalizedRecord objects into output rows."""

    return [record_to_output_row(record) for record in records]
