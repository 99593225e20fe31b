"""Exceptions raised while generating the locale dispatch file."""

from __future__ import annotations

from pathlib import Path


class ClosureLocaleError(Exception):
    """Base class for generator failures."""


class AliasChainError(ClosureLocaleError):
    """Raised when an alias chain is longer than the hop limit."""

    def __init__(self, locale: str, chain: list[str], max_hops: int) -> None:
        self.locale = locale
        self.chain = chain
        self.max_hops = max_hops
        super().__init__(
            f"Alias chain for '{locale}' exceeds {max_hops} hops: "
            + " -> ".join([locale, *chain])
        )


class DuplicateLocaleError(ClosureLocaleError):
    """Raised when a requested locale is already covered by an earlier branch."""

    def __init__(self, locale: str, owner: str) -> None:
        self.locale = locale
        self.owner = owner
        super().__init__(
            f"Locale '{locale}' is already handled by the branch for '{owner}'."
        )


class OverlappingBranchesError(ClosureLocaleError):
    """Raised when two dispatch branches share a case label."""

    def __init__(self, overlaps: dict[str, list[str]]) -> None:
        self.overlaps = overlaps
        details = ", ".join(
            f"'{code}' ({', '.join(owners)})" for code, owners in sorted(overlaps.items())
        )
        super().__init__(f"Duplicate case labels across branches: {details}")


class MissingLocaleDataError(ClosureLocaleError):
    """Raised in strict mode when no data file exists for a branch."""

    def __init__(self, locale: str, codes: list[str], data_dir: Path) -> None:
        self.locale = locale
        self.codes = codes
        self.data_dir = data_dir
        super().__init__(
            f"No locale data for '{locale}' in {data_dir} "
            f"(tried: {', '.join(codes)})."
        )


class LocaleDataFormatError(ClosureLocaleError):
    """Raised when a locale data file does not have the expected envelope."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Malformed locale data file '{path}': {reason}")


class FormatterError(ClosureLocaleError):
    """Raised when clang-format is unavailable or fails."""


class LocaleDataReadError(ClosureLocaleError):
    """Raised when an existing locale data file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read locale data file '{path}': {reason}")


class CldrDataError(ClosureLocaleError):
    """Raised when CLDR supplemental data is not valid JSON or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid CLDR data in '{path}': {reason}")
