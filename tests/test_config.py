"""
Tests for the Runtime Configuration Store.

Verifies:
1. Defaults without any pyproject.toml.
2. Loading ``[tool.hlisp]`` from the nearest pyproject.toml.
3. CLI overrides and path resolution.
4. Validation errors.
"""

import pytest
from pydantic import ValidationError

from hlisp.config import CompilerConfig


def _write_toml(directory, body):
  (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults(tmp_path):
  _write_toml(tmp_path, "[project]\nname = 'site'\n")
  config = CompilerConfig.load(search_path=tmp_path)
  assert config.js_uri == "main.js"
  assert config.base_uri is None
  assert config.out_dir is None
  assert config.line_width == 72
  assert config.compile_options == {"width": 72, "doctype": "html"}


def test_loads_tool_section_from_parent(tmp_path):
  _write_toml(
    tmp_path,
    '[tool.hlisp]\njs_uri = "out/app.js"\nbase_uri = "out/goog/base.js"\nout_dir = "build"\nline_width = 100\ndoctype = ""\n',
  )
  pages = tmp_path / "pages" / "blog"
  pages.mkdir(parents=True)

  config = CompilerConfig.load(search_path=pages)
  assert config.js_uri == "out/app.js"
  assert config.base_uri == "out/goog/base.js"
  assert config.out_dir == (tmp_path / "build").resolve()
  assert config.line_width == 100
  assert config.compile_options["doctype"] is None


def test_cli_overrides_win(tmp_path):
  _write_toml(tmp_path, '[tool.hlisp]\njs_uri = "toml.js"\nout_dir = "build"\nline_width = 100\n')
  config = CompilerConfig.load(
    js_uri="cli.js",
    base_uri="base.js",
    out_dir=tmp_path / "dist",
    line_width=40,
    search_path=tmp_path,
  )
  assert config.js_uri == "cli.js"
  assert config.base_uri == "base.js"
  assert config.out_dir == tmp_path / "dist"
  assert config.line_width == 40


def test_absolute_out_dir_is_kept(tmp_path):
  target = tmp_path / "elsewhere"
  _write_toml(tmp_path, f"[tool.hlisp]\nout_dir = '{target.as_posix()}'\n")
  assert CompilerConfig.load(search_path=tmp_path).out_dir == target


def test_invalid_toml_raises_value_error(tmp_path):
  _write_toml(tmp_path, "[tool.hlisp\njs_uri = ")
  with pytest.raises(ValueError, match="Invalid TOML"):
    CompilerConfig.load(search_path=tmp_path)


def test_line_width_is_validated(tmp_path):
  _write_toml(tmp_path, "")
  with pytest.raises(ValidationError):
    CompilerConfig.load(line_width=5, search_path=tmp_path)


def test_direct_construction():
  config = CompilerConfig(js_uri="x.js", line_width=20)
  assert config.compile_options["width"] == 20
