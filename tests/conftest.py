"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Snapshot testing fixture for compiled page output.
- Console isolation so log capture in one test does not leak into the next.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable, Optional

# Add src to path so we can import 'hlisp' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hlisp.forms import read_one  # noqa: E402
from hlisp.utils.console import reset_console  # noqa: E402


class SnapshotAssert:
  """
  Simple snapshot comparison logic to verify generated output stability.
  """

  def __init__(self, request: pytest.FixtureRequest):
    self.request = request
    self.test_name = request.node.name
    self.module_path = Path(request.node.fspath).parent
    self.snapshot_dir = self.module_path / "__snapshots__"
    self.update_mode = request.config.getoption("--update-snapshots", default=False)

  def assert_match(self, content: str, extension: str = "txt", normalizer: Optional[Callable[[str], str]] = None):
    """
    Compares content against stored file. A missing snapshot is recorded.

    Args:
        content: The actual output string.
        extension: File extension (default 'txt').
        normalizer: Optional function to clean both content and expected string before comparison.
    """
    if not self.snapshot_dir.exists():
      self.snapshot_dir.mkdir(parents=True)

    snapshot_file = self.snapshot_dir / f"{self.test_name}.{extension}"
    content = content.replace("\r\n", "\n")

    if self.update_mode or not snapshot_file.exists():
      snapshot_file.write_text(normalizer(content) if normalizer else content, encoding="utf-8")
      return

    expected = snapshot_file.read_text(encoding="utf-8").replace("\r\n", "\n")
    lhs, rhs = content, expected
    if normalizer:
      lhs, rhs = normalizer(lhs), normalizer(rhs)

    assert lhs == rhs, (
      f"Snapshot mismatch for {snapshot_file.name}. Run pytest with --update-snapshots to accept changes."
    )


@pytest.fixture
def snapshot(request):
  """Fixture to assert text matches a stored snapshot."""
  return SnapshotAssert(request)


@pytest.fixture
def read():
  """Shorthand for reading a single form from source text."""
  return read_one


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures the console is back on stdout after every test."""
  yield
  reset_console()


def pytest_addoption(parser):
  """Add CLI flag to update snapshots."""
  parser.addoption("--update-snapshots", action="store_true", default=False, help="Update snapshots for visual tests")
