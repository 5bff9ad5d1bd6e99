"""Core building blocks for the pricesurvey package."""
from pricesurvey.core.errors import PriceSurveyError, SchemaError, UnknownItemError, UnsupportedSourceError
from pricesurvey.core.logging import configure_logging
from pricesurvey.core.models import (
    IDENTITY_COLUMNS,
    ITEMS_CHOSEN,
    REQUIRED_COLUMNS,
    NormalizedRecord,
    RawRecord,
)
from pricesurvey.core.utils import get_bool_config, get_config_value, load_env_file

__all__ = [
    "IDENTITY_COLUMNS",
    "ITEMS_CHOSEN",
    "REQUIRED_COLUMNS",
    "NormalizedRecord",
    "PriceSurveyError",
    "RawRecord",
    "SchemaError",
    "UnknownItemError",
    "UnsupportedSourceError",
    "configure_logging",
    "get_bool_config",
    "get_config_value",
    "load_env_file",
]
