"""Tests for coverage/jacoco.py module."""

from __future__ import annotations

from pathlib import Path

import pytest

from lcovbridge.core.errors import BundleError, ErrorCode
from lcovbridge.coverage.bundle import LineCoverage
from lcovbridge.coverage.jacoco import load_jacoco_xml

JACOCO_XML = """\
<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<!DOCTYPE report PUBLIC "-//JACOCO//DTD Report 1.1//EN" "report.dtd">
<report name="demo">
  <sessioninfo id="s1" start="1" dump="2"/>
  <package name="com/example">
    <class name="com/example/Foo" sourcefilename="Foo.java">
      <method name="&lt;init&gt;" desc="()V" line="3">
        <counter type="INSTRUCTION" missed="0" covered="3"/>
        <counter type="METHOD" missed="0" covered="1"/>
      </method>
      <method name="check" desc="(I)Z" line="5">
        <counter type="METHOD" missed="1" covered="0"/>
      </method>
    </class>
    <class name="com/example/Foo$Inner" sourcefilename="Foo.java"/>
    <class name="com/example/Gen"/>
    <sourcefile name="Foo.java">
      <line nr="3" mi="0" ci="3" mb="0" cb="0"/>
      <line nr="4" mi="0" ci="0" mb="0" cb="0"/>
      <line nr="5" mi="4" ci="2" mb="1" cb="1"/>
      <line nr="6" mi="2" ci="0" mb="0" cb="0"/>
    </sourcefile>
  </package>
  <group name="nested">
    <package name="org/lib">
      <class name="org/lib/Bar" sourcefilename="Bar.java"/>
    </package>
  </group>
</report>
"""


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    path = tmp_path / "jacoco.xml"
    path.write_text(JACOCO_XML)
    return path


class TestLoadJacocoXml:
    """Tests for load_jacoco_xml."""

    def test_packages_including_groups(self, report_path: Path) -> None:
        bundle = load_jacoco_xml(report_path)
        assert bundle.name == "demo"
        assert [p.name for p in bundle.packages()] == ["com/example", "org/lib"]

    def test_classes(self, report_path: Path) -> None:
        package = load_jacoco_xml(report_path).packages()[0]
        assert [(c.name, c.source_file_name) for c in package.classes] == [
            ("com/example/Foo", "Foo.java"),
            ("com/example/Foo$Inner", "Foo.java"),
            ("com/example/Gen", None),
        ]
        assert all(c.package_name == "com/example" for c in package.classes)

    def test_lines_from_sourcefile(self, report_path: Path) -> None:
        foo = load_jacoco_xml(report_path).packages()[0].classes[0]
        assert foo.lines == {
            3: LineCoverage(number=3, hits=1),
            5: LineCoverage(number=5, hits=1, missed_branches=1, covered_branches=1),
            6: LineCoverage(number=6, hits=0),
        }

    def test_inner_class_shares_sourcefile_lines(self, report_path: Path) -> None:
        classes = load_jacoco_xml(report_path).packages()[0].classes
        assert classes[1].lines == classes[0].lines
        assert classes[2].lines == {}

    def test_methods(self, report_path: Path) -> None:
        foo = load_jacoco_xml(report_path).packages()[0].classes[0]
        assert [(m.name, m.descriptor, m.first_line, m.hits) for m in foo.methods] == [
            ("<init>", "()V", 3, 1),
            ("check", "(I)Z", 5, 0),
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BundleError) as exc_info:
            load_jacoco_xml(tmp_path / "missing.xml")
        assert exc_info.value.code == ErrorCode.BUNDLE_NOT_FOUND

    def test_invalid_xml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xml"
        path.write_text("<report><package>")
        with pytest.raises(BundleError) as exc_info:
            load_jacoco_xml(path)
        assert exc_info.value.code == ErrorCode.BUNDLE_INVALID

    def test_wrong_root(self, tmp_path: Path) -> None:
        path = tmp_path / "cobertura.xml"
        path.write_text("<coverage/>")
        with pytest.raises(BundleError, match="expected <report> root"):
            load_jacoco_xml(path)
