"""Pipeline orchestration for survey exports."""
from pricesurvey.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
