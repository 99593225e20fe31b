"""Pytest configuration for the closure-locale test suite.

Hypothesis profiles:
- dev: local development (200 examples)
- ci: CI runs (50 examples, derandomized)

CI=true selects "ci"; HYPOTHESIS_PROFILE overrides the choice.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import settings

from closure_locale.constants import EXPORT_PREFIX, HEADER

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.load_profile(
    os.environ.get("HYPOTHESIS_PROFILE")
    or ("ci" if os.environ.get("CI", "").lower() == "true" else "dev")
)


def locale_file_content(payload: str, header: str = HEADER) -> str:
    """Content of a generated per-locale data file exporting `payload`."""
    return f"{header}\n{EXPORT_PREFIX}{payload};\n"


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "locales"
    directory.mkdir()
    return directory


@pytest.fixture
def write_locale(data_dir: Path) -> Callable[[str, str], Path]:
    """Write `<locale>.ts` exporting `payload` into the data directory."""

    def _write(locale: str, payload: str) -> Path:
        path = data_dir / f"{locale}.ts"
        path.write_text(locale_file_content(payload), encoding="utf-8")
        return path

    return _write
