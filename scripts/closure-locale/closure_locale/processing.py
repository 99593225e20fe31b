"""Equivalence classes, branch grouping and runtime selection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from .constants import DATA_FILE_EXTENSION, HEADER, MAX_ALIAS_HOPS
from .errors import (
    AliasChainError,
    DuplicateLocaleError,
    MissingLocaleDataError,
    OverlappingBranchesError,
)
from .loaders import load_locale_data
from .models import DispatchBranch, LocaleData


def normalize_runtime_locale(locale: str) -> str:
    """Normalize a runtime locale string the way the generated switch does."""
    return locale.replace("_", "-")


def separator_variant(locale: str) -> str | None:
    """Return the `_` spelling of a `-` separated locale code."""
    if "-" not in locale:
        return None
    # Rewrites every separator: 'zh-Hans-CN' gives 'zh_Hans_CN', not 'zh_Hans-CN'.
    return locale.replace("-", "_")


def resolve_alias_chain(
    locale: str, aliases: Mapping[str, str], max_hops: int = MAX_ALIAS_HOPS
) -> list[str]:
    """Follow `aliases` from `locale` and return every target in order.

    The chain stops at a code without alias or when it loops back onto a
    code already visited.

    Raises:
        AliasChainError: If more than `max_hops` targets are reachable.
    """
    chain: list[str] = []
    current = locale
    while current in aliases:
        target = aliases[current]
        if target == locale or target in chain:
            break
        if len(chain) == max_hops:
            raise AliasChainError(locale, [*chain, target], max_hops)
        chain.append(target)
        current = target
    return chain


def equivalent_locales(
    locale: str, aliases: Mapping[str, str], max_hops: int = MAX_ALIAS_HOPS
) -> list[str]:
    """Codes dispatched to the same branch as `locale`, in label order.

    e.g. with 'no' -> 'nb' and 'nb' -> 'no-NO', 'no' yields
    ['no', 'nb', 'no-NO'].
    """
    codes = [locale]
    variant = separator_variant(locale)
    if variant is not None:
        codes.append(variant)
    for target in resolve_alias_chain(locale, aliases, max_hops):
        if target not in codes:
            codes.append(target)
    return codes


def find_locale_data(
    data_dir: Path,
    codes: Iterable[str],
    *,
    header: str = HEADER,
    extension: str = DATA_FILE_EXTENSION,
) -> LocaleData | None:
    """Look up a data file for each code; the last one found wins."""
    found: LocaleData | None = None
    for code in codes:
        data = load_locale_data(data_dir, code, header=header, extension=extension)
        if data is not None:
            found = data
    return found


def build_branches(
    locales: Sequence[str],
    aliases: Mapping[str, str],
    data_dir: Path,
    *,
    header: str = HEADER,
    extension: str = DATA_FILE_EXTENSION,
    strict: bool = False,
    max_hops: int = MAX_ALIAS_HOPS,
) -> list[DispatchBranch]:
    """Group each requested locale with its aliases into one dispatch branch.

    Branches keep the order of `locales`. A code already claimed by an
    earlier branch is dropped from the later one, so no label is emitted
    twice.

    Raises:
        DuplicateLocaleError: If a requested locale belongs to an earlier branch.
        MissingLocaleDataError: In strict mode, when a branch has no data file.
    """
    owners: dict[str, str] = {}
    branches: list[DispatchBranch] = []
    for locale in locales:
        if locale in owners:
            raise DuplicateLocaleError(locale, owners[locale])

        equivalents = equivalent_locales(locale, aliases, max_hops)
        codes: list[str] = []
        dropped: list[str] = []
        for code in equivalents:
            if code in owners:
                dropped.append(code)
            else:
                owners[code] = locale
                codes.append(code)

        data = find_locale_data(
            data_dir, equivalents, header=header, extension=extension
        )
        if data is None and strict:
            raise MissingLocaleDataError(locale, equivalents, data_dir)

        branches.append(
            DispatchBranch(
                locale=locale,
                codes=tuple(codes),
                data=data,
                dropped=tuple(dropped),
            )
        )
    return branches


def find_overlaps(branches: Iterable[DispatchBranch]) -> dict[str, list[str]]:
    """Map each label claimed by several branches to the claiming locales."""
    claims: dict[str, list[str]] = {}
    for branch in branches:
        for code in branch.codes:
            claims.setdefault(code, []).append(branch.locale)
    return {code: owners for code, owners in claims.items() if len(owners) > 1}


def validate_branches(branches: Sequence[DispatchBranch]) -> None:
    """Raise OverlappingBranchesError if two branches share a label."""
    overlaps = find_overlaps(branches)
    if overlaps:
        raise OverlappingBranchesError(overlaps)


def select_branch(
    branches: Iterable[DispatchBranch], runtime_locale: str
) -> DispatchBranch | None:
    """Return the branch the generated switch takes for `runtime_locale`."""
    wanted = normalize_runtime_locale(runtime_locale)
    for branch in branches:
        if wanted in branch.codes:
            return branch
    return None


def select_locale_data(
    branches: Iterable[DispatchBranch], runtime_locale: str
) -> LocaleData | None:
    """Return the payload registered for `runtime_locale`, if any."""
    branch = select_branch(branches, runtime_locale)
    if branch is None:
        return None
    return branch.data
