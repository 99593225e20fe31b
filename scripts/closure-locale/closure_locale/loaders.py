"""Loaders for per-locale data files and CLDR alias data."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from .constants import DATA_FILE_EXTENSION, EXPORT_PREFIX, HEADER
from .errors import CldrDataError, LocaleDataFormatError, LocaleDataReadError
from .io import load_json, read_text
from .models import AliasesData, LocaleData

CLDR_ALIASES_PATH = Path("cldr-core") / "supplemental" / "aliases.json"


def locale_data_path(
    data_dir: Path, locale: str, extension: str = DATA_FILE_EXTENSION
) -> Path:
    """Path of the data file for `locale`."""
    return data_dir / f"{locale}{extension}"


def parse_locale_data(locale: str, path: Path, content: str, header: str) -> LocaleData:
    """Parse the `<header>` + `export default <payload>;` envelope of a data file."""
    prefix = f"{header}\n{EXPORT_PREFIX}"
    if not content.startswith(prefix):
        raise LocaleDataFormatError(
            path, f"expected the file header followed by '{EXPORT_PREFIX.strip()}'"
        )
    payload = content[len(prefix) :].rstrip().removesuffix(";").rstrip()
    if not payload:
        raise LocaleDataFormatError(path, "empty export")
    return LocaleData(locale=locale, payload=payload, path=path)


def load_locale_data(
    data_dir: Path,
    locale: str,
    *,
    header: str = HEADER,
    extension: str = DATA_FILE_EXTENSION,
) -> LocaleData | None:
    """Load the data file for `locale`, or None when there is none.

    Raises:
        LocaleDataFormatError: If the file is not UTF-8 or lacks the envelope.
        LocaleDataReadError: If the file exists but cannot be read.
    """
    path = locale_data_path(data_dir, locale, extension)
    try:
        content = read_text(path)
    except UnicodeDecodeError as e:
        raise LocaleDataFormatError(path, "not valid UTF-8") from e
    except OSError as e:
        raise LocaleDataReadError(path, e.strerror or str(e)) from e
    if content is None:
        return None
    return parse_locale_data(locale, path, content, header)


def cldr_tag(tag: str) -> str:
    """Rewrite a CLDR `_` separated tag to the `-` form used in data file names."""
    return tag.replace("_", "-")


def load_language_aliases(
    cldr_root: Path, keys: Iterable[str] | None = None
) -> dict[str, str]:
    """Load CLDR languageAlias entries as `deprecated -> replacement` tags.

    When `keys` is given, only aliases for those codes are returned.

    Raises:
        CldrDataError: If aliases.json is not valid JSON or has the wrong shape.
    """
    path = cldr_root / CLDR_ALIASES_PATH
    try:
        data = AliasesData.model_validate(load_json(path))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise CldrDataError(path, details) from e
    except ValueError as e:
        raise CldrDataError(path, str(e)) from e

    wanted = None if keys is None else set(keys)
    aliases: dict[str, str] = {}
    for deprecated, entry in data.language_aliases.items():
        tokens = entry.replacement.split()
        if not tokens:
            continue
        source = cldr_tag(deprecated)
        if wanted is not None and source not in wanted:
            continue
        target = cldr_tag(tokens[0])
        if target != source:
            aliases[source] = target
    return aliases
