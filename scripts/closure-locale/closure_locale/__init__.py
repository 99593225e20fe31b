"""Locale dispatch generator for Closure builds."""

from .generator import generate, generate_with_branches
from .models import DispatchBranch, LocaleData
from .processing import (
    build_branches,
    equivalent_locales,
    select_locale_data,
    validate_branches,
)
from .writers import render_document, write_document

__all__ = [
    "DispatchBranch",
    "LocaleData",
    "build_branches",
    "equivalent_locales",
    "generate",
    "generate_with_branches",
    "render_document",
    "select_locale_data",
    "validate_branches",
    "write_document",
]
