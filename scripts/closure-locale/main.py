#!/usr/bin/env python3
"""CLI entrypoint for generating closure-locale.ts from per-locale data files."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Annotated

import typer

from closure_locale.constants import ALIASES, GOOG_LOCALES, OUTPUT_NAME
from closure_locale.errors import ClosureLocaleError
from closure_locale.generator import generate_with_branches
from closure_locale.io import DownloadError, ExtractionError, download_file, extract_members
from closure_locale.loaders import CLDR_ALIASES_PATH, load_language_aliases
from closure_locale.models import DispatchBranch
from closure_locale.writers import format_document, write_document

CLDR_RELEASE = "48.0.0"
CLDR_ARCHIVE_NAME = f"cldr-{CLDR_RELEASE}-json-full.zip"
CLDR_URL = (
    "https://github.com/unicode-org/cldr-json/releases/download/"
    f"{CLDR_RELEASE}/{CLDR_ARCHIVE_NAME}"
)

__SCRIPT_DIR = Path(__file__).resolve().parent
REPO_ROOT = __SCRIPT_DIR.parent.parent
CACHE_DIR = __SCRIPT_DIR / "cldr"
CLDR_CACHE_PATH = CACHE_DIR / CLDR_ARCHIVE_NAME

I18N_DATA_DIR = REPO_ROOT / "packages" / "common" / "locales"
OUTPUT_FILE = I18N_DATA_DIR / OUTPUT_NAME

app = typer.Typer(
    help="Generate the closure-locale dispatch file from per-locale data files.",
    add_completion=False,
)


def parse_locales(value: str | None) -> list[str]:
    """Split a comma separated locale override, ignoring blanks."""
    if not value:
        return list(GOOG_LOCALES)
    return [locale.strip() for locale in value.split(",") if locale.strip()]


def load_cldr_aliases(cldr_zip: Path | None, locales: list[str]) -> dict[str, str]:
    """Read CLDR language aliases for `locales` from the CLDR JSON archive."""
    if cldr_zip:
        archive_path = cldr_zip
        typer.echo(f"Using existing CLDR archive: {archive_path}")
    elif CLDR_CACHE_PATH.is_file():
        archive_path = CLDR_CACHE_PATH
        typer.echo(f"Using cached CLDR archive: {archive_path}")
    else:
        archive_path = CLDR_CACHE_PATH
        typer.echo(f"Downloading {CLDR_URL}...")
        download_file(CLDR_URL, archive_path)

    with tempfile.TemporaryDirectory() as tmp_dir:
        extract_dir = Path(tmp_dir) / "cldr"
        typer.echo(f"Extracting {CLDR_ALIASES_PATH.as_posix()}...")
        extract_members(archive_path, extract_dir, (CLDR_ALIASES_PATH.as_posix(),))
        return load_language_aliases(extract_dir, keys=locales)


def report_branches(branches: list[DispatchBranch]) -> None:
    owners = {code: branch.locale for branch in branches for code in branch.codes}
    for branch in branches:
        for code in branch.dropped:
            typer.secho(
                f"Warning: '{code}' for '{branch.locale}' is already handled by '{owners[code]}'.",
                fg=typer.colors.YELLOW,
                err=True,
            )
        if branch.data is None:
            typer.secho(
                f"Warning: no locale data for '{branch.locale}' "
                f"({', '.join(branch.codes)}); the branch assigns undefined.",
                fg=typer.colors.YELLOW,
                err=True,
            )


@app.command()
def main(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Destination TypeScript file.",
            writable=True,
            resolve_path=True,
        ),
    ] = OUTPUT_FILE,
    data_dir: Annotated[
        Path,
        typer.Option(
            "--data-dir",
            help="Directory containing the per-locale data files (<locale>.ts).",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = I18N_DATA_DIR,
    locales: Annotated[
        str | None,
        typer.Option(
            "--locales",
            help="Comma separated locales to include (e.g., fr,fr-CA,no). Defaults to the Closure locales.",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict/--no-strict",
            help="Fail when a locale has no data file instead of assigning undefined.",
        ),
    ] = False,
    cldr_aliases: Annotated[
        bool,
        typer.Option(
            "--cldr-aliases/--no-cldr-aliases",
            help="Add CLDR language aliases for the requested locales to the built-in table.",
        ),
    ] = False,
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Path to an existing CLDR archive. If missing, the archive will be downloaded to the cache directory.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    format_output: Annotated[
        bool,
        typer.Option(
            "--format/--no-format",
            help="Run clang-format on the generated file.",
        ),
    ] = False,
    clang_format: Annotated[
        str,
        typer.Option(
            "--clang-format",
            help="clang-format executable used with --format.",
        ),
    ] = "clang-format",
) -> None:
    """Generate closure-locale.ts for the requested locales."""
    requested = parse_locales(locales)
    if not requested:
        typer.secho("Error: no locales requested.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    aliases = dict(ALIASES)
    if cldr_aliases:
        try:
            extra_aliases = load_cldr_aliases(cldr_zip, requested)
        except (DownloadError, ExtractionError) as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        except ClosureLocaleError as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        added = {key: value for key, value in extra_aliases.items() if key not in aliases}
        typer.echo(f"Adding {len(added)} CLDR aliases...")
        aliases = {**added, **aliases}

    typer.echo(f"Collecting locale data for {len(requested)} locales from {data_dir}...")
    try:
        document, branches = generate_with_branches(
            requested, aliases, data_dir, strict=strict
        )
    except ClosureLocaleError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    report_branches(branches)

    typer.echo(f"Writing file {output}")
    write_document(output, document)

    if format_output:
        typer.echo(f"Formatting {output}...")
        try:
            format_document(output, clang_format)
        except ClosureLocaleError as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    typer.secho(
        f"\nSuccessfully wrote {len(branches)} locale branches to {output}",
        fg=typer.colors.GREEN,
        bold=True,
    )


if __name__ == "__main__":
    app()
