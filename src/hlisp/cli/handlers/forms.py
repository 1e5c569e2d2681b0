"""
Forms Command Handler.

Implements `hlisp forms`: shows the form forest a source file parses into,
before any compilation. Useful to see how markup, embedded hlisp scripts and
style blocks are represented.
"""

from pathlib import Path
from typing import Any, List

from rich.markup import escape
from rich.syntax import Syntax

from hlisp.forms.printer import pformat
from hlisp.forms.reader import read_string
from hlisp.tagsoup import parse_string, soup_to_forms
from hlisp.utils.console import console, log_error


def handle_forms(input_path: Path, width: int = 72) -> int:
  """
  Prints the parsed forest of a ``.html`` or ``.cljs`` file.

  Args:
      input_path: Source file.
      width: Pretty printer margin.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  text = input_path.read_text(encoding="utf-8")
  try:
    if input_path.suffix == ".html":
      forest: List[Any] = soup_to_forms(parse_string(text))
    elif input_path.suffix == ".cljs":
      forest = read_string(text)
    else:
      log_error(f"Unsupported file type: {input_path}")
      return 1
  except SyntaxError as e:
    log_error(f"{input_path}: {escape(str(e))}")
    return 1

  source = "\n\n".join(pformat(node, width) for node in forest)
  console.print(Syntax(source, "clojure"))
  return 0
