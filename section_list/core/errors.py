"""Exceptions raised by the section list core."""

from __future__ import annotations


class SectionListError(Exception):
    """Base exception for section list errors."""


class InvalidCategoryError(SectionListError, LookupError):
    """Raised when a category reference matches none of the known categories."""

    def __init__(self, ref: object) -> None:
        self.ref = ref
        super().__init__(f"Unknown category: {ref!r}")


class SectionDataError(SectionListError, ValueError):
    """Raised when a section data file cannot be turned into a catalog."""

    def __init__(self, source: object, message: str) -> None:
        self.source = source
        super().__init__(f"Invalid section data in {source}: {message}")
