"""File I/O helpers for the CLDR archive and the generated document."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import requests
from tqdm import tqdm

DEFAULT_USER_AGENT = "closure-locale-generator/1.0"
DEFAULT_TIMEOUT_SECONDS = 60


class DownloadError(Exception):
    """Raised when a file download fails."""


class ExtractionError(Exception):
    """Raised when archive extraction fails."""


def download_file(url: str, destination: Path) -> None:
    """Download a file from URL with progress bar.

    Args:
        url: URL to download from.
        destination: Local path to save the file.

    Raises:
        DownloadError: If the download fails.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    partial = destination.with_name(destination.name + ".part")
    try:
        with requests.get(
            url,
            stream=True,
            timeout=DEFAULT_TIMEOUT_SECONDS,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        ) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))

            with (
                partial.open("wb") as output,
                tqdm(
                    desc=f"Downloading {destination.name}",
                    total=total_size,
                    unit="iB",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar,
            ):
                for chunk in response.iter_content(chunk_size=8192):
                    bar.update(output.write(chunk))
    except requests.RequestException as e:
        partial.unlink(missing_ok=True)
        raise DownloadError(f"Error downloading file: {e}") from e
    partial.replace(destination)


def extract_members(
    archive_path: Path, destination: Path, suffixes: tuple[str, ...]
) -> list[Path]:
    """Extract the archive members whose names end with one of `suffixes`.

    Returns:
        Paths of the extracted files, in archive order.

    Raises:
        ExtractionError: If the archive cannot be read or a member is missing.
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = [
                member
                for member in archive.infolist()
                if not member.is_dir() and member.filename.endswith(suffixes)
            ]
            if not members:
                raise ExtractionError(
                    f"No member matching {', '.join(suffixes)} in '{archive_path}'."
                )
            extracted: list[Path] = []
            with tqdm(
                total=len(members),
                desc=f"Extracting {archive_path.name}",
                unit="file",
            ) as bar:
                for member in members:
                    extracted.append(Path(archive.extract(member, destination)))
                    bar.update(1)
            return extracted
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"Failed to open zip file '{archive_path}'. It may be corrupted."
        ) from e
    except OSError as e:
        raise ExtractionError(f"Error extracting archive: {e}") from e


def load_json(path: Path) -> dict:
    """Load JSON file from disk."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def read_text(path: Path) -> str | None:
    """Read a UTF-8 text file, or return None when it does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def write_text(path: Path, content: str) -> None:
    """Write a UTF-8 text file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
