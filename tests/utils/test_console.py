"""
Tests for the Logging and Console Utility.

Verifies:
1. The console proxy forwards to a real Rich console.
2. Injection via `set_console` captures log helpers and library loggers.
3. Verbosity switching and the SUCCESS level.
"""

import io
import logging

from rich.console import Console

from hlisp.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
  set_verbose,
)


def _capture() -> Console:
  capture = Console(record=True, file=io.StringIO(), width=120)
  set_console(capture)
  return capture


def test_proxy_forwards_to_backend():
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)


def test_log_helpers_are_captured():
  capture = _capture()
  log_info("Compiling pages")
  log_success("Wrote index.html")
  log_warning("No sources")
  log_error("Broken page")

  output = capture.export_text()
  assert "Compiling pages" in output
  assert "Wrote index.html" in output
  assert "SUCCESS" in output
  assert "No sources" in output
  assert "Broken page" in output
  assert "✅" in output


def test_library_loggers_propagate_to_console():
  capture = _capture()
  set_verbose(True)
  try:
    logging.getLogger("hlisp.core.styles").debug("style detail")
  finally:
    set_verbose(False)
  assert "style detail" in capture.export_text()


def test_debug_hidden_when_not_verbose():
  capture = _capture()
  set_verbose(False)
  logging.getLogger("hlisp.compiler").debug("hidden detail")
  assert "hidden detail" not in capture.export_text()


def test_injection_replaces_handler():
  first = _capture()
  second = _capture()
  log_info("only once")
  assert "only once" not in first.export_text()
  assert "only once" in second.export_text()


def test_reset_restores_default():
  temp = Console(file=io.StringIO())
  set_console(temp)
  assert get_console() is temp
  reset_console()
  assert get_console() is not temp


def test_success_level_name():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"
