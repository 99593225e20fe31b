"""Tests for the closure-locale command line."""

import json
import zipfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from closure_locale.loaders import CLDR_ALIASES_PATH
from main import app, parse_locales

runner = CliRunner()


@pytest.fixture
def output(tmp_path: Path) -> Path:
    return tmp_path / "out" / "closure-locale.ts"


def invoke(data_dir: Path, output: Path, *args: str):
    return runner.invoke(
        app, ["--data-dir", str(data_dir), "--output", str(output), *args]
    )


class TestParseLocales:
    def test_default_list(self) -> None:
        locales = parse_locales(None)
        assert len(locales) == 100
        assert locales[0] == "af"
        assert locales[-1] == "zu"

    def test_override_ignores_blanks(self) -> None:
        assert parse_locales(" fr, ,fr-CA,") == ["fr", "fr-CA"]


class TestGenerateCommand:
    def test_writes_requested_locales(self, data_dir: Path, output: Path, write_locale) -> None:
        write_locale("fr", "['fr']")
        write_locale("nb", "['nb']")
        result = invoke(data_dir, output, "--locales", "fr,no")
        assert result.exit_code == 0, result.output
        content = output.read_text(encoding="utf-8")
        assert "case 'fr':\n  l = ['fr'];\n  break;\n" in content
        assert "case 'no':\ncase 'nb':\ncase 'no-NO':\n  l = ['nb'];\n" in content
        assert "Successfully wrote 2 locale branches" in result.output

    def test_default_locales(self, data_dir: Path, output: Path) -> None:
        result = invoke(data_dir, output)
        assert result.exit_code == 0, result.output
        content = output.read_text(encoding="utf-8")
        assert "case 'zu':" in content
        assert "Successfully wrote 100 locale branches" in result.output

    def test_warns_about_missing_data(self, data_dir: Path, output: Path) -> None:
        result = invoke(data_dir, output, "--locales", "xx")
        assert result.exit_code == 0
        assert "Warning: no locale data for 'xx'" in result.output
        assert "l = undefined;" in output.read_text(encoding="utf-8")

    def test_warns_about_shared_codes(self, data_dir: Path, output: Path) -> None:
        result = invoke(data_dir, output, "--locales", "zh-HK,zh-TW")
        assert result.exit_code == 0
        assert "'zh-Hant' for 'zh-TW' is already handled by 'zh-HK'" in result.output

    def test_strict_mode_fails_without_writing(self, data_dir: Path, output: Path) -> None:
        result = invoke(data_dir, output, "--locales", "xx", "--strict")
        assert result.exit_code == 1
        assert "Error: No locale data for 'xx'" in result.output
        assert not output.exists()

    def test_contradictory_locales_fail(self, data_dir: Path, output: Path) -> None:
        result = invoke(data_dir, output, "--locales", "no,nb")
        assert result.exit_code == 1
        assert "already handled by the branch for 'no'" in result.output

    def test_malformed_data_file_fails(self, data_dir: Path, output: Path) -> None:
        (data_dir / "fr.ts").write_text("export default [];\n", encoding="utf-8")
        result = invoke(data_dir, output, "--locales", "fr")
        assert result.exit_code == 1
        assert "Malformed locale data file" in result.output

    def test_undecodable_data_file_fails(self, data_dir: Path, output: Path) -> None:
        (data_dir / "fr.ts").write_bytes(b"\xff\xfe garbage")
        result = invoke(data_dir, output, "--locales", "fr")
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Malformed locale data file" in result.output
        assert "not valid UTF-8" in result.output
        assert not output.exists()

    def test_directory_in_place_of_data_file_fails(self, data_dir: Path, output: Path) -> None:
        (data_dir / "fr.ts").mkdir()
        result = invoke(data_dir, output, "--locales", "fr")
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Cannot read locale data file" in result.output

    def test_empty_locale_list_fails(self, data_dir: Path, output: Path) -> None:
        result = invoke(data_dir, output, "--locales", ", ,")
        assert result.exit_code == 1
        assert "no locales requested" in result.output

    def test_format_failure_keeps_written_file(self, data_dir: Path, output: Path) -> None:
        result = invoke(
            data_dir,
            output,
            "--locales",
            "fr",
            "--format",
            "--clang-format",
            "clang-format-does-not-exist",
        )
        assert result.exit_code == 1
        assert "was not found" in result.output
        assert output.is_file()


class TestCldrAliases:
    @pytest.fixture
    def cldr_zip(self, tmp_path: Path) -> Path:
        path = tmp_path / "cldr-json-full.zip"
        aliases = {
            "supplemental": {
                "metadata": {
                    "alias": {
                        "languageAlias": {
                            "cnr": {"_reason": "legacy", "_replacement": "sr_ME"},
                            "in": {"_reason": "deprecated", "_replacement": "ms"},
                            "jw": {"_reason": "deprecated", "_replacement": "jv"},
                        }
                    }
                }
            }
        }
        with zipfile.ZipFile(path, "w") as handle:
            handle.writestr(CLDR_ALIASES_PATH.as_posix(), json.dumps(aliases))
        return path

    def test_merges_aliases_for_requested_locales(
        self, data_dir: Path, output: Path, cldr_zip: Path
    ) -> None:
        result = invoke(
            data_dir,
            output,
            "--locales",
            "cnr,in",
            "--cldr-aliases",
            "--cldr-zip",
            str(cldr_zip),
        )
        assert result.exit_code == 0, result.output
        assert "Adding 1 CLDR aliases" in result.output
        content = output.read_text(encoding="utf-8")
        assert "case 'cnr':\ncase 'sr-ME':\n" in content
        # Built-in entries take precedence over CLDR.
        assert "case 'in':\ncase 'id':\n" in content
        assert "case 'jv':" not in content

    def test_aliases_ignored_without_flag(
        self, data_dir: Path, output: Path, cldr_zip: Path
    ) -> None:
        result = invoke(
            data_dir, output, "--locales", "cnr", "--cldr-zip", str(cldr_zip)
        )
        assert result.exit_code == 0, result.output
        assert "case 'sr-ME':" not in output.read_text(encoding="utf-8")

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            (json.dumps({"supplemental": {}}), "supplemental.metadata: Field required"),
            ("{not json", "Invalid CLDR data"),
        ],
    )
    def test_invalid_aliases_json_fails(
        self, data_dir: Path, output: Path, tmp_path: Path, content: str, message: str
    ) -> None:
        archive = tmp_path / "invalid.zip"
        with zipfile.ZipFile(archive, "w") as handle:
            handle.writestr(CLDR_ALIASES_PATH.as_posix(), content)
        result = invoke(
            data_dir,
            output,
            "--locales",
            "cnr",
            "--cldr-aliases",
            "--cldr-zip",
            str(archive),
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Invalid CLDR data" in result.output
        assert message in result.output
        assert not output.exists()

    def test_corrupted_archive_fails(self, data_dir: Path, output: Path, tmp_path: Path) -> None:
        broken = tmp_path / "broken.zip"
        broken.write_bytes(b"not a zip")
        result = invoke(
            data_dir,
            output,
            "--locales",
            "cnr",
            "--cldr-aliases",
            "--cldr-zip",
            str(broken),
        )
        assert result.exit_code == 1
        assert "may be corrupted" in result.output
