"""Tests for the lcovbridge CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lcovbridge.cli.main import cli

runner = CliRunner()

JACOCO_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<report name="demo">
  <package name="com/example">
    <class name="com/example/Foo" sourcefilename="Foo.java">
      <method name="run" desc="()V" line="3">
        <counter type="METHOD" missed="0" covered="1"/>
      </method>
    </class>
    <sourcefile name="Foo.java">
      <line nr="3" mi="0" ci="2" mb="0" cb="0"/>
      <line nr="4" mi="1" ci="0" mb="0" cb="0"/>
    </sourcefile>
  </package>
</report>
"""


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """The CLI reconfigures the root logger against CliRunner's streams."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "jacoco.xml").write_text(JACOCO_XML)
    return tmp_path


class TestCli:
    """Top-level group tests."""

    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help_lists_convert(self) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "convert" in result.output


class TestConvertCommand:
    """Tests for lcovbridge convert."""

    def test_writes_lcov_file(self, workdir: Path) -> None:
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--path", "/repo/src/com/example/Foo.java",
             "-o", str(out), "--quiet"],
        )
        assert result.exit_code == 0, result.output
        assert out.read_text() == (
            "SF:/repo/src/com/example/Foo.java\n"
            "FN:3,com/example/Foo::run ()V\n"
            "FNDA:1,com/example/Foo::run ()V\n"
            "FNF:1\n"
            "FNH:1\n"
            "DA:3,1\n"
            "DA:4,0\n"
            "LH:1\n"
            "LF:2\n"
            "end_of_record\n"
        )

    def test_paths_file_with_mapping(self, workdir: Path) -> None:
        paths_file = workdir / "paths.txt"
        paths_file.write_text(
            "# known sources\n\n/real/Foo.java///com/example/Foo.java\n/other/Bar.java\n"
        )
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--paths-file", str(paths_file), "-o", str(out), "-q"],
        )
        assert result.exit_code == 0, result.output
        text = out.read_text()
        assert text.startswith("SF:/real/Foo.java\n")
        assert "SF:com/example/Foo.java" not in text

    def test_no_match_writes_empty_file(self, workdir: Path) -> None:
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--path", "/path/does/not/match/anything.txt",
             "-o", str(out), "-q"],
        )
        assert result.exit_code == 0, result.output
        assert out.read_text() == ""

    def test_flags_disable_records(self, workdir: Path) -> None:
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--path", "C:\\repo\\com\\example\\Foo.java",
             "--no-functions", "--no-branches", "-o", str(out), "-q"],
        )
        assert result.exit_code == 0, result.output
        text = out.read_text()
        assert text.startswith("SF:C:/repo/com/example/Foo.java\n")
        assert "FN:" not in text

    def test_custom_delimiter(self, workdir: Path) -> None:
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--delimiter", "=>",
             "--path", "/real/Foo.java=>com/example/Foo.java", "-o", str(out), "-q"],
        )
        assert result.exit_code == 0, result.output
        assert out.read_text().startswith("SF:/real/Foo.java\n")

    def test_summary_printed(self, workdir: Path) -> None:
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--path", "/repo/com/example/Foo.java", "-o", str(out)],
        )
        assert result.exit_code == 0, result.output
        assert "Coverage: 50.0% (1/2 lines)" in result.output

    def test_missing_report(self, workdir: Path) -> None:
        result = runner.invoke(
            cli, ["convert", "missing.xml", "-o", str(workdir / "lcov.info"), "-q"]
        )
        assert result.exit_code == 1
        assert "BUNDLE_NOT_FOUND" in result.output

    def test_missing_config(self, workdir: Path) -> None:
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--config", "nope.yaml",
             "-o", str(workdir / "lcov.info"), "-q"],
        )
        assert result.exit_code == 1
        assert "CONFIG_FILE_NOT_FOUND" in result.output

    def test_config_file_applies(self, workdir: Path) -> None:
        (workdir / ".lcovbridge.yaml").write_text("formatter:\n  emit_functions: false\n")
        out = workdir / "lcov.info"
        result = runner.invoke(
            cli,
            ["convert", "jacoco.xml", "--path", "/repo/com/example/Foo.java",
             "-o", str(out), "-q"],
        )
        assert result.exit_code == 0, result.output
        assert "FN:" not in out.read_text()
