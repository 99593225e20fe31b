"""Pydantic models for locale data, dispatch branches and CLDR alias data."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class LocaleData(BaseModel, frozen=True):
    """Exported payload of one per-locale data file."""

    locale: str
    payload: str = Field(min_length=1)
    path: Path


class DispatchBranch(BaseModel, frozen=True):
    """One grouped `case` block of the generated switch.

    `codes` are the case labels of the branch. `dropped` lists members of the
    locale's equivalence class that an earlier branch already claims; they
    are not emitted as labels but still take part in the data lookup.
    """

    locale: str
    codes: tuple[str, ...]
    data: LocaleData | None = None
    dropped: tuple[str, ...] = ()

    @property
    def payload(self) -> str:
        """Expression assigned by the branch."""
        return self.data.payload if self.data else "undefined"


class AliasEntry(BaseModel):
    """Entry of a CLDR alias table."""

    replacement: str = Field(alias="_replacement")
    reason: str | None = Field(default=None, alias="_reason")


class AliasTables(BaseModel):
    """Alias block in aliases.json."""

    language_alias: dict[str, AliasEntry] = Field(alias="languageAlias")


class AliasMetadata(BaseModel):
    """Metadata block in aliases.json."""

    alias: AliasTables


class SupplementalAliases(BaseModel):
    """Supplemental block in aliases.json."""

    metadata: AliasMetadata


class AliasesData(BaseModel):
    """Model for supplemental/aliases.json."""

    supplemental: SupplementalAliases

    @property
    def language_aliases(self) -> dict[str, AliasEntry]:
        return self.supplemental.metadata.alias.language_alias
