"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from lcovbridge.coverage.bundle import (  # noqa: E402
    Bundle,
    ClassCoverage,
    LineCoverage,
    MethodCoverage,
)


@pytest.fixture
def foo_bundle() -> Bundle:
    """Single class com/example/Foo in Foo.java without line data."""
    return Bundle.of(
        ClassCoverage(
            name="com/example/Foo",
            package_name="com/example",
            source_file_name="Foo.java",
        )
    )


@pytest.fixture
def detailed_bundle() -> Bundle:
    """Foo.java with lines, a branch line and two methods, plus an inner class."""
    lines = {
        3: LineCoverage(number=3, hits=1),
        5: LineCoverage(number=5, hits=1, missed_branches=1, covered_branches=1),
        6: LineCoverage(number=6, hits=0),
        9: LineCoverage(number=9, hits=0, missed_branches=2),
    }
    foo = ClassCoverage(
        name="com/example/Foo",
        package_name="com/example",
        source_file_name="Foo.java",
        lines=lines,
        methods=(
            MethodCoverage(name="<init>", first_line=3, hits=1, descriptor="()V"),
            MethodCoverage(name="check", first_line=5, hits=1, descriptor="(I)Z"),
        ),
    )
    inner = ClassCoverage(
        name="com/example/Foo$Inner",
        package_name="com/example",
        source_file_name="Foo.java",
        lines=lines,
        methods=(MethodCoverage(name="run", first_line=9, hits=0, descriptor="()V"),),
    )
    generated = ClassCoverage(
        name="com/example/Foo$$Lambda",
        package_name="com/example",
        source_file_name=None,
    )
    return Bundle.of(foo, inner, generated)
