"""Rendering and writing of the closure-locale dispatch file."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable
from pathlib import Path

from .constants import HEADER, REGISTER_IMPORT
from .errors import FormatterError
from .io import write_text
from .models import DispatchBranch


def render_branch(branch: DispatchBranch) -> str:
    """Render the fall-through `case` labels and shared body of a branch."""
    lines = [f"case '{code}':" for code in branch.codes]
    lines.append(f"  l = {branch.payload};")
    lines.append("  break;")
    return "\n".join(lines) + "\n"


def render_document(branches: Iterable[DispatchBranch], header: str = HEADER) -> str:
    """Render the complete dispatch file.

    Tree shaking only keeps the branch matching `goog.LOCALE`.
    """
    cases = "".join(render_branch(branch) for branch in branches)
    return (
        f"{header}\n"
        f"{REGISTER_IMPORT}\n"
        "\n"
        "let l: any;\n"
        "\n"
        "switch (goog.LOCALE.replace(/_/g, '-')) {\n"
        f"{cases}"
        "}\n"
        "\n"
        "if (l) {\n"
        "  l[0] = goog.LOCALE;\n"
        "  registerLocaleData(l);\n"
        "}\n"
    )


def write_document(output_path: Path, content: str) -> None:
    write_text(output_path, content)


def format_document(output_path: Path, executable: str = "clang-format") -> None:
    """Reformat `output_path` in place with clang-format.

    Raises:
        FormatterError: If clang-format cannot be run or exits with an error.
    """
    command = [executable, "-i", "--style=file", str(output_path)]
    try:
        subprocess.run(command, check=True, text=True, capture_output=True)
    except FileNotFoundError as error:
        raise FormatterError(f"Formatter '{executable}' was not found.") from error
    except subprocess.CalledProcessError as error:
        stderr = (error.stderr or "").strip()
        raise FormatterError(
            f"Formatting {output_path} failed. {stderr or 'Check the formatter configuration.'}"
        ) from error
