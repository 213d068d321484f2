import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    """Report location inside a directory that does not exist yet."""
    return tmp_path / "ci" / "gl-codequality.json"
