"""
Module Assembly.

Builds the generated ClojureScript module from a page's namespace
declaration and its content forms:

1.  **Import merging**: The runtime environment's capability surface is
    appended to the declaration's first ``(:use ...)`` clause.
2.  **Entry point**: An exported, zero-argument ``hlispinit`` function hands
    the content forms to ``hlisp.env/init``.
3.  **Rendering**: Each top-level form is pretty printed.
"""

import logging
from typing import Any, List, Sequence

from hlisp.enums import HeadKind
from hlisp.core.registry import INIT_FN, RUNTIME_EXPORTS, RUNTIME_NS, head_kind
from hlisp.forms.nodes import Form, Keyword, Literal, Symbol, Vector, is_form
from hlisp.forms.printer import dumps, pformat

logger = logging.getLogger(__name__)

EXPORT_META = Literal("^:export")


def _name_index(nsdecl: Any) -> int:
  idx = 1
  while idx < len(nsdecl) and isinstance(nsdecl[idx], Literal):
    idx += 1
  return idx


def namespace_name(nsdecl: Any) -> Symbol:
  """
  Returns the name of a namespace declaration.

  Reader metadata in front of the name (``(ns ^:figwheel-always app.core)``)
  is skipped.

  Args:
      nsdecl: An ``(ns ...)`` form.

  Returns:
      Symbol: The namespace name.

  Raises:
      ValueError: If ``nsdecl`` is not a namespace declaration with a symbol name.
  """
  if head_kind(nsdecl) == HeadKind.NS:
    idx = _name_index(nsdecl)
    if idx < len(nsdecl) and isinstance(nsdecl[idx], Symbol):
      return nsdecl[idx]
  raise ValueError(f"Expected a namespace declaration, got: {dumps(nsdecl)[:60]}")


def add_runtime_uses(nsdecl: Any) -> Form:
  """
  Merges the mandatory runtime import into a namespace declaration.

  The first ``:use`` clause receives `RUNTIME_EXPORTS` and stays in its
  position. Without one, a fresh clause is placed right after the namespace
  name (and any docstring or attribute map following it). Every other
  clause is kept as-is, in order.

  Args:
      nsdecl: An ``(ns name clause*)`` form.

  Returns:
      Form: The augmented declaration.

  Raises:
      ValueError: If ``nsdecl`` is not a namespace declaration with a name.
  """
  name = namespace_name(nsdecl)
  idx = _name_index(nsdecl) + 1
  prefix, clauses = list(nsdecl[:idx]), list(nsdecl[idx:])
  use_idx = next((i for i, c in enumerate(clauses) if head_kind(c) == HeadKind.USE), None)

  if use_idx is None:
    use_idx = 0
    while use_idx < len(clauses) and not is_form(clauses[use_idx]):
      use_idx += 1
    clauses.insert(use_idx, Form([Keyword("use")]))

  clauses[use_idx] = clauses[use_idx] + [RUNTIME_EXPORTS]
  logger.debug(f"Merged runtime imports into namespace {dumps(name)}.")
  return Form(prefix + clauses)


def init_function(content_forms: Sequence[Any]) -> Form:
  """
  Synthesizes the exported initialization entry point.

  Args:
      content_forms (Sequence[Any]): Page forms, namespace declaration excluded.

  Returns:
      Form: ``(defn ^:export hlispinit [] (hlisp.env/init [forms...]))``.
  """
  call = Form([Symbol(f"{RUNTIME_NS}/init"), Vector(content_forms)])
  return Form([Symbol("defn"), EXPORT_META, Symbol(INIT_FN), Vector(), call])


def assemble_module(nsdecl: Any, content_forms: Sequence[Any]) -> List[Form]:
  """
  Produces the top-level forms of the generated module.

  Args:
      nsdecl: The page's namespace declaration.
      content_forms (Sequence[Any]): Page forms following it.

  Returns:
      List[Form]: The augmented declaration and the init function.
  """
  return [add_runtime_uses(nsdecl), init_function(content_forms)]


def render_module(forms: Sequence[Any], width: int = 72) -> str:
  """
  Renders module forms as source text, one pretty printed form per block.

  Args:
      forms (Sequence[Any]): Top-level forms.
      width (int): Right margin for the pretty printer.

  Returns:
      str: The module source.
  """
  return "\n".join(pformat(f, width) + "\n" for f in forms)
