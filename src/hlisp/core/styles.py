"""
Style DSL Compiler.

Compiles ``style`` forms written as selector vectors and property maps into
CSS text::

    (style [:div :p] [:h1] {:color "red"}
           [:a] {:text-decoration :none})

becomes ``(style {:type "text/css"} "div p,\\nh1 {\\n  color: red;\\n}\\n\\na {...")``.
A selector group may also be written as one vector of paths
(``[[:div :p] [:h1]]``), and a whole stylesheet may be wrapped in a single
vector.
"""

import logging
from itertools import groupby
from typing import Any, Dict, List

from hlisp.enums import HeadKind
from hlisp.core.registry import head_kind
from hlisp.core.rewrite import update_by
from hlisp.forms.nodes import Form, Keyword, Symbol, Vector, name_of

logger = logging.getLogger(__name__)

CSS_TYPE = {Keyword("type"): "text/css"}


def _selector_paths(run: List[Any]) -> List[Any]:
  paths: List[Any] = []
  for sel in run:
    if isinstance(sel, Vector) and sel and all(isinstance(p, Vector) for p in sel):
      paths.extend(sel)
    else:
      paths.append(sel)
  return paths


def _selector_str(run: List[Any]) -> str:
  def path_str(path: Any) -> str:
    tokens = path if isinstance(path, Vector) else [path]
    return " ".join(name_of(t) for t in tokens)

  return ",\n".join(path_str(p) for p in _selector_paths(run))


def _property_str(run: List[Dict[Any, Any]]) -> str:
  merged: Dict[str, str] = {}
  for props in run:
    for key, value in props.items():
      merged[name_of(key)] = name_of(value)
  lines = "".join(f"  {k}: {v};\n" for k, v in merged.items())
  return " {\n" + lines + "}\n"


def clj_to_css(forms: List[Any]) -> str:
  """
  Renders alternating selector and property runs as CSS.

  Runs are split by whether an item is a map; the i-th selector run pairs
  with the i-th property run. A trailing selector run without properties is
  dropped.

  Args:
      forms (List[Any]): Style body items.

  Returns:
      str: The stylesheet text.
  """
  runs = [(is_map, list(items)) for is_map, items in groupby(forms, key=lambda f: isinstance(f, dict))]
  selectors = [items for is_map, items in runs if not is_map]
  properties = [items for is_map, items in runs if is_map]
  if runs and runs[0][0]:
    logger.debug("Style block starts with a property map; it has no selector and is dropped.")
    properties = properties[1:]
  pairs = zip(selectors, properties)
  return "\n".join(_selector_str(sels) + _property_str(props) for sels, props in pairs)


def compile_style(node: Form) -> Form:
  """
  Compiles one ``style`` form.

  Args:
      node (Form): ``(style ...)``.

  Returns:
      Form: ``(style {:type "text/css"} css)`` when the body starts with a
      selector vector, otherwise ``node`` unchanged.
  """
  body = list(node[1:])
  if len(body) == 1 and isinstance(body[0], Vector) and any(isinstance(i, dict) for i in body[0]):
    body = list(body[0])
  if not body or not isinstance(body[0], Vector):
    return node
  return Form([Symbol("style"), dict(CSS_TYPE), clj_to_css(body)])


def process_styles(root: Any) -> Any:
  """
  Compiles every ``style`` form found anywhere in a forest.

  Args:
      root: Forest root.

  Returns:
      Any: The rewritten forest.
  """
  return update_by(root, lambda n: head_kind(n) == HeadKind.STYLE, compile_style)
