"""JaCoCo XML report adapter.

Turns a JaCoCo ``report`` XML into an in-memory ``Bundle``.

Structure:
<report name="...">
  <package name="com/example">
    <class name="com/example/Foo" sourcefilename="Foo.java">
      <method name="bar" desc="()V" line="10">
        <counter type="METHOD" missed="0" covered="1"/>
      </method>
    </class>
    <sourcefile name="Foo.java">
      <line nr="10" mi="0" ci="3" mb="0" cb="0"/>
      <line nr="11" mi="2" ci="1" mb="1" cb="1"/>
    </sourcefile>
  </package>
</report>

Packages may also be nested inside ``<group>`` elements.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from lcovbridge.core.errors import BundleError
from lcovbridge.core.logging import get_logger
from lcovbridge.coverage.bundle import (
    Bundle,
    ClassCoverage,
    LineCoverage,
    MethodCoverage,
    PackageCoverage,
)

log = get_logger(__name__)


def _int_attr(element: ET.Element, name: str) -> int:
    try:
        return int(element.get(name, 0))
    except ValueError:
        return 0


def _parse_sourcefile_lines(sourcefile: ET.Element) -> dict[int, LineCoverage]:
    lines: dict[int, LineCoverage] = {}
    for line in sourcefile.findall("line"):
        nr = _int_attr(line, "nr")
        mi = _int_attr(line, "mi")  # missed instructions
        ci = _int_attr(line, "ci")  # covered instructions
        if nr <= 0 or mi + ci == 0:
            continue
        # JaCoCo counts instructions, not executions: any covered instruction is one hit
        lines[nr] = LineCoverage(
            number=nr,
            hits=1 if ci > 0 else 0,
            missed_branches=_int_attr(line, "mb"),
            covered_branches=_int_attr(line, "cb"),
        )
    return lines


def _parse_methods(cls: ET.Element) -> tuple[MethodCoverage, ...]:
    methods = []
    for method in cls.findall("method"):
        name = method.get("name", "")
        if not name:
            continue
        counter = method.find("counter[@type='METHOD']")
        hits = _int_attr(counter, "covered") if counter is not None else 0
        methods.append(
            MethodCoverage(
                name=name,
                first_line=_int_attr(method, "line"),
                hits=hits,
                descriptor=method.get("desc", ""),
            )
        )
    return tuple(methods)


def _parse_package(package: ET.Element) -> PackageCoverage:
    package_name = package.get("name", "")
    source_lines = {
        sourcefile.get("name", ""): _parse_sourcefile_lines(sourcefile)
        for sourcefile in package.findall("sourcefile")
    }

    classes = []
    for cls in package.findall("class"):
        source_file_name = cls.get("sourcefilename") or None
        classes.append(
            ClassCoverage(
                name=cls.get("name", ""),
                package_name=package_name,
                source_file_name=source_file_name,
                lines=source_lines.get(source_file_name or "", {}),
                methods=_parse_methods(cls),
            )
        )
    return PackageCoverage(name=package_name, classes=tuple(classes))


def load_jacoco_xml(path: Path) -> Bundle:
    """Parse a JaCoCo XML report into a Bundle.

    Raises:
        BundleError: If the file is missing or is not a JaCoCo report.
    """
    if not path.is_file():
        raise BundleError.not_found(str(path))

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise BundleError.invalid(str(path), str(e)) from e

    if root.tag != "report":
        raise BundleError.invalid(str(path), f"expected <report> root, got <{root.tag}>")

    packages = tuple(_parse_package(package) for package in root.iter("package"))
    log.debug(
        "jacoco_report_loaded",
        path=str(path),
        packages=len(packages),
        classes=sum(len(p.classes) for p in packages),
    )
    return Bundle(name=root.get("name", ""), package_list=packages)
