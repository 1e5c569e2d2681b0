"""
Compilation Pipeline.

Entry points, by how much pre-processing the caller has already done:

- `compile_forms`: a parsed form forest.
- `compile_tagsoup`: a tag-soup forest from `hlisp.tagsoup.parse_string`.
- `compile_string`: raw HTML text.
- `compile_file`: a path, dispatched on its extension (``.html`` for markup,
  ``.cljs`` for a namespace source whose last form is the page).
"""

import logging
import re
from pathlib import Path
from typing import Any, Callable, List, Optional, Pattern, Tuple, Union

from hlisp.core.bundle import OutputBundle
from hlisp.core.document import compile_forms, move_forms_to_body
from hlisp.forms.reader import read_string
from hlisp.tagsoup import SoupNode, parse_string, soup_to_forms

logger = logging.getLogger(__name__)


def compile_tagsoup(
  soup: List[SoupNode],
  js_uri: str,
  base_uri: Optional[str] = None,
  **options: Any,
) -> OutputBundle:
  """
  Compiles a tag-soup forest.

  Args:
      soup (List[SoupNode]): Parsed markup.
      js_uri (str): URI of the compiled module.
      base_uri (Optional[str]): URI of the Closure base script.
      **options: Forwarded to `compile_forms` (``width``, ``doctype``).

  Returns:
      OutputBundle: The page and the module.
  """
  return compile_forms(soup_to_forms(soup), js_uri, base_uri, **options)


def compile_string(html: str, js_uri: str, base_uri: Optional[str] = None, **options: Any) -> OutputBundle:
  """
  Compiles HTML text whose body embeds forms in ``<script type="text/hlisp">``.

  Args:
      html (str): Markup source.
      js_uri (str): URI of the compiled module.
      base_uri (Optional[str]): URI of the Closure base script.
      **options: Forwarded to `compile_forms`.

  Returns:
      OutputBundle: The page and the module.
  """
  return compile_tagsoup(parse_string(html), js_uri, base_uri, **options)


def compile_cljs_string(source: str, js_uri: str, base_uri: Optional[str] = None, **options: Any) -> OutputBundle:
  """
  Compiles a namespace source: ``(ns ...)``, logic forms, then ``(html ...)``.

  Args:
      source (str): ClojureScript source text.
      js_uri (str): URI of the compiled module.
      base_uri (Optional[str]): URI of the Closure base script.
      **options: Forwarded to `compile_forms`.

  Returns:
      OutputBundle: The page and the module.
  """
  return compile_forms(move_forms_to_body(read_string(source)), js_uri, base_uri, **options)


Handler = Callable[..., OutputBundle]

_DISPATCH: List[Tuple[Pattern[str], Handler]] = [
  (re.compile(r"\.html$"), compile_string),
  (re.compile(r"\.cljs$"), compile_cljs_string),
]


def handler_for(path: Union[str, Path]) -> Optional[Handler]:
  """
  Finds the compile function for a path by extension.

  Args:
      path: Source path.

  Returns:
      Optional[Handler]: The handler, or None for unsupported files.
  """
  name = str(path)
  for pattern, handler in _DISPATCH:
    if pattern.search(name):
      return handler
  return None


def compile_file(
  path: Union[str, Path],
  js_uri: str,
  base_uri: Optional[str] = None,
  **options: Any,
) -> Optional[OutputBundle]:
  """
  Compiles a source file.

  Args:
      path: ``.html`` or ``.cljs`` source.
      js_uri (str): URI of the compiled module.
      base_uri (Optional[str]): URI of the Closure base script.
      **options: Forwarded to `compile_forms`.

  Returns:
      Optional[OutputBundle]: The result, or None when the extension is not
      supported (the file is not read in that case).
  """
  handler = handler_for(path)
  if handler is None:
    logger.debug(f"No compiler registered for {path}")
    return None
  text = Path(path).read_text(encoding="utf-8")
  return handler(text, js_uri, base_uri, **options)


__all__ = [
  "compile_cljs_string",
  "compile_file",
  "compile_forms",
  "compile_string",
  "compile_tagsoup",
  "handler_for",
]
