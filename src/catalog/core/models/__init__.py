"""Result models returned by catalog services."""

from .import_result import ImportDetail, ImportResult

__all__ = ["ImportDetail", "ImportResult"]
