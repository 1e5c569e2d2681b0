"""
Data structures representing the output of the compiler.

This module defines the `OutputBundle` Pydantic model, which pairs the
rendered markup with the generated code module. The two halves reference
each other (the page bootstraps the module's namespace and init function),
so they are always produced and written together.
"""

from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, Field


class OutputBundle(BaseModel):
  """
  Container for the results of one compilation.
  """

  markup: str = Field(..., description="The rendered HTML document.")
  code: str = Field(..., description="The generated ClojureScript module.")

  def write(self, out_dir: Path, stem: str) -> Tuple[Path, Path]:
    """
    Writes both halves next to each other.

    Args:
        out_dir (Path): Destination directory (created if missing).
        stem (str): File name without extension.

    Returns:
        Tuple[Path, Path]: Paths of the written ``.html`` and ``.cljs`` files.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    html_path = out_dir / f"{stem}.html"
    cljs_path = out_dir / f"{stem}.cljs"
    html_path.write_text(self.markup, encoding="utf-8")
    cljs_path.write_text(self.code, encoding="utf-8")
    return html_path, cljs_path
