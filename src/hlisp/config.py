"""
Runtime Configuration Store.

Holds the settings a compilation needs beyond its source: where the page
loads the compiled module from, where outputs go, and how they are printed.
Values come from ``[tool.hlisp]`` in the nearest ``pyproject.toml`` and are
overridden by explicit (CLI) arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class CompilerConfig(BaseModel):
  """
  Global configuration container for the compiler.
  """

  js_uri: str = Field("main.js", description="URI the page loads the compiled module from.")
  base_uri: Optional[str] = Field(None, description="URI of the Closure base script (unoptimized builds).")
  out_dir: Optional[Path] = Field(None, description="Directory for generated .html/.cljs files.")
  line_width: int = Field(72, description="Right margin of the generated module.")
  doctype: str = Field("html", description="Doctype of the rendered page. Empty string omits it.")

  @field_validator("line_width")
  @classmethod
  def validate_width(cls, v: int) -> int:
    """
    Ensures the pretty printer has room to work.

    Args:
        v (int): Requested margin.

    Returns:
        int: The margin.

    Raises:
        ValueError: If the margin is below 20 columns.
    """
    if v < 20:
      raise ValueError(f"line_width must be at least 20, got {v}")
    return v

  @property
  def compile_options(self) -> Dict[str, Any]:
    """
    Keyword options understood by the `hlisp.compiler` entry points.

    Returns:
        Dict[str, Any]: ``width`` and ``doctype``.
    """
    return {"width": self.line_width, "doctype": self.doctype or None}

  @classmethod
  def load(
    cls,
    js_uri: Optional[str] = None,
    base_uri: Optional[str] = None,
    out_dir: Optional[Path] = None,
    line_width: Optional[int] = None,
    search_path: Optional[Path] = None,
  ) -> "CompilerConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        js_uri (Optional[str]): Override for the module URI.
        base_uri (Optional[str]): Override for the Closure base URI.
        out_dir (Optional[Path]): Override for the output directory.
        line_width (Optional[int]): Override for the pretty printer margin.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        CompilerConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    final_out = out_dir
    if final_out is None and "out_dir" in toml_config:
      final_out = Path(toml_config["out_dir"])
      if toml_dir and not final_out.is_absolute():
        final_out = (toml_dir / final_out).resolve()

    values: Dict[str, Any] = {
      "js_uri": js_uri or toml_config.get("js_uri", "main.js"),
      "base_uri": base_uri or toml_config.get("base_uri"),
      "out_dir": final_out,
      "line_width": line_width if line_width is not None else toml_config.get("line_width", 72),
      "doctype": toml_config.get("doctype", "html"),
    }
    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.

  Raises:
      ValueError: If the nearest pyproject.toml is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {toml_path}: {e}")

      return data.get("tool", {}).get("hlisp", {}), parent

  return {}, None
