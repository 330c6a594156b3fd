"""Authored article content."""

from .golang_testing_with_interfaces import (
    PUBLISHED,
    SLUG,
    TITLE,
    golang_testing_with_interfaces,
)

__all__ = ["PUBLISHED", "SLUG", "TITLE", "golang_testing_with_interfaces"]
