"""Exceptions raised when a survey export cannot be reshaped at all."""
from __future__ import annotations

from typing import Iterable


class PriceSurveyError(Exception):
    """Base class for errors surfaced to callers of the package."""


class SchemaError(PriceSurveyError):
    """A required column is missing from the input table."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        columns = ", ".join(f"'{name}'" for name in self.missing)
        super().__init__(f"Input is missing required column(s): {columns}")


class UnknownItemError(PriceSurveyError, KeyError):
    """An item name was requested that the category registry does not know."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown item category: {self.name!r}"


class UnsupportedSourceError(PriceSurveyError, ValueError):
    """The input file type cannot be read as a survey table."""
