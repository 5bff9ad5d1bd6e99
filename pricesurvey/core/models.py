"""Data models for survey rows before and after reshaping."""
from dataclasses import dataclass
from typing import Mapping, Optional

# One row of the wide export, keyed by the exact source column names.
RawRecord = Mapping[str, str]

SUBMISSION_ID = "Submission ID"
USER_ID = "UserId"
SUBMISSION_TIME = "Submission time"
DISTRICT = "DistrictName"
UPAZILA = "UpazilaName"
ITEMS_CHOSEN = "Items to Choose"

IDENTITY_COLUMNS = (SUBMISSION_ID, USER_ID, SUBMISSION_TIME, DISTRICT, UPAZILA)
REQUIRED_COLUMNS = IDENTITY_COLUMNS + (ITEMS_CHOSEN,)


@dataclass(frozen=True)
class NormalizedRecord:
    """A single (submission, item) observation in the long table."""

    submission_id: str
    user_id: str
    submission_time: str
    district: str
    upazila: str
    item_name: str
    item_code: int
    price: Optional[float] = None
    purchase_option: Optional[str] = None
    shop_type: Optional[str] = None
