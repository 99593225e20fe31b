"""Generation of the closure-locale dispatch document."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from .constants import DATA_FILE_EXTENSION, HEADER
from .models import DispatchBranch
from .processing import build_branches, validate_branches
from .writers import render_document


def generate_with_branches(
    locales: Sequence[str],
    aliases: Mapping[str, str],
    data_dir: Path,
    *,
    header: str = HEADER,
    extension: str = DATA_FILE_EXTENSION,
    strict: bool = False,
) -> tuple[str, list[DispatchBranch]]:
    """Build, check and render the dispatch branches for `locales`."""
    branches = build_branches(
        locales,
        aliases,
        data_dir,
        header=header,
        extension=extension,
        strict=strict,
    )
    validate_branches(branches)
    return render_document(branches, header), branches


def generate(
    locales: Sequence[str],
    aliases: Mapping[str, str],
    data_dir: Path,
    *,
    header: str = HEADER,
    extension: str = DATA_FILE_EXTENSION,
    strict: bool = False,
) -> str:
    """Generate the file that registers the locale data selected by `goog.LOCALE`.

    Every locale in `locales` gets one branch labelled with all its
    equivalent codes (see `equivalent_locales`); branches follow input
    order. Locales without a data file assign `undefined` unless `strict`.
    """
    document, _ = generate_with_branches(
        locales,
        aliases,
        data_dir,
        header=header,
        extension=extension,
        strict=strict,
    )
    return document
