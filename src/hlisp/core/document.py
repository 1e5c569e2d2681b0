"""
Document Assembly.

Moves forms between a page's markup and its generated module.

Forward (`compile_forms`):
1.  Locate the single ``body`` inside the single ``html`` node.
2.  Split its content into the namespace declaration and page forms.
3.  Compile styles, canonicalize and normalize the page forms (and the
    other children of ``html``, such as ``head``).
4.  Append the bootstrap scripts that load and start the generated module.
5.  Substitute the new body and render both halves of the `OutputBundle`.

Reverse (`move_forms_to_body`): lift a ``.cljs`` source (namespace
declaration, logic expressions, markup document) into a single document
whose body carries the logic, ready for the forward pass.
"""

import logging
from typing import Any, List, Optional, Sequence

from hlisp.enums import HeadKind
from hlisp.core.bundle import OutputBundle
from hlisp.core.module import assemble_module, namespace_name, render_module
from hlisp.core.normalize import htmlize
from hlisp.core.registry import INIT_FN, head_kind, make_form
from hlisp.core.rewrite import replace_node
from hlisp.core.styles import process_styles
from hlisp.forms.nodes import Form, Keyword, Symbol, attrs_of, children_of
from hlisp.forms.printer import dumps
from hlisp.tagsoup.convert import forms_to_html, pedanticize

logger = logging.getLogger(__name__)

JS_TYPE = "text/javascript"

CLEAR_BODY_JS = "\n".join(
  [
    "(function(node) {",
    "  while (node.hasChildNodes())",
    "    node.removeChild(node.lastChild);",
    "})(document.body);",
  ]
)


def _find_unique(nodes: Sequence[Any], kind: HeadKind, where: str) -> Form:
  found = [n for n in nodes if head_kind(n) == kind]
  if not found:
    raise ValueError(f"No <{kind.value}> node found in {where}.")
  if len(found) > 1:
    raise ValueError(f"Expected exactly one <{kind.value}> node in {where}, found {len(found)}.")
  return found[0]


def find_html(document: Any) -> Form:
  """
  Locates the unique ``html`` node of a document.

  Args:
      document: Either the ``html`` form itself or a sequence of top-level
          forms containing exactly one ``html`` form.

  Returns:
      Form: The ``html`` form.

  Raises:
      ValueError: If ``html`` is missing or duplicated.
  """
  if head_kind(document) == HeadKind.HTML:
    return document
  return _find_unique(document, HeadKind.HTML, "the document")


def find_body(document: Any) -> Form:
  """
  Locates the unique ``body`` node of a document.

  Args:
      document: Either the ``html`` form itself or a sequence of top-level
          forms containing exactly one ``html`` form.

  Returns:
      Form: The ``body`` form (the object inside ``document``).

  Raises:
      ValueError: If ``html`` or ``body`` is missing or duplicated.
  """
  return _find_unique(find_html(document)[1:], HeadKind.BODY, "<html>")


def prepend_children(node: Form, new_kids: Sequence[Any]) -> Form:
  """
  Inserts children at the front of an element, after its attribute map.

  A node without an attribute map gets an empty one.

  Args:
      node (Form): The element.
      new_kids (Sequence[Any]): Children to insert, in order.

  Returns:
      Form: The new element.
  """
  attrs = attrs_of(node)
  return Form([node[0], {} if attrs is None else attrs] + list(new_kids) + list(children_of(node)))


def _script(body: Optional[str] = None, src: Optional[str] = None) -> Form:
  attrs = {Keyword("type"): JS_TYPE}
  if src is not None:
    attrs[Keyword("src")] = src
  return make_form("script", attrs) if body is None else make_form("script", attrs, body)


def js_namespace(nsname: Any) -> str:
  """JavaScript object path of a ClojureScript namespace (``my-app.core`` -> ``my_app.core``)."""
  return dumps(nsname).replace("-", "_")


def bootstrap_scripts(nsname: Any, js_uri: str, base_uri: Optional[str] = None) -> List[Form]:
  """
  Builds the script elements that hand the page over to the generated module.

  With a base URI (unoptimized Closure build): clear body, load base,
  load main, ``goog.require`` the namespace, call its init function.
  Without one (single compiled file): clear body, disable Closure dependency
  loading, load main, call init.

  Args:
      nsname: The namespace name symbol.
      js_uri (str): URI of the compiled module.
      base_uri (Optional[str]): URI of the Closure base script.

  Returns:
      List[Form]: Five or four ``script`` forms.
  """
  js_ns = js_namespace(nsname)
  s_empty = _script(CLEAR_BODY_JS)
  s_main = _script(src=js_uri)
  s_init = _script(f"{js_ns}.{INIT_FN}();")
  if base_uri:
    return [s_empty, _script(src=base_uri), s_main, _script(f"goog.require('{js_ns}');"), s_init]
  return [s_empty, _script("var CLOSURE_NO_DEPS = true;"), s_main, s_init]


def _to_markup(node: Any) -> Any:
  return htmlize(pedanticize(process_styles(node)))


def compile_forms(
  document: Any,
  js_uri: str,
  base_uri: Optional[str] = None,
  width: int = 72,
  doctype: Optional[str] = "html",
) -> OutputBundle:
  """
  Compiles a parsed document into markup and a code module.

  Args:
      document: The ``html`` form or a top-level forest containing it.
      js_uri (str): URI the page loads the compiled module from.
      base_uri (Optional[str]): URI of the Closure base script, if any.
      width (int): Right margin for the generated module.
      doctype (Optional[str]): Doctype of the rendered page.

  Returns:
      OutputBundle: The page and the module.

  Raises:
      ValueError: If the document has no unique body, or the body does not
          start with a namespace declaration.
  """
  html = find_html(document)
  body = _find_unique(html[1:], HeadKind.BODY, "<html>")
  battr = attrs_of(body) or {}
  forms = list(children_of(body))
  if not forms or head_kind(forms[0]) != HeadKind.NS:
    raise ValueError("The first form in <body> must be a namespace declaration.")

  content = forms[1:]
  module_forms = assemble_module(forms[0], content)
  nsname = namespace_name(forms[0])
  logger.debug(f"Compiling namespace {dumps(nsname)} with {len(content)} page forms.")

  bhtml = [_to_markup(f) for f in content]
  scripts = bootstrap_scripts(nsname, js_uri, base_uri)
  new_body = Form([Symbol("body"), battr] + bhtml + scripts)

  # Siblings of body (head and its content) are normalized as well.
  new_html = Form([html[0]] + [new_body if kid is body else _to_markup(kid) for kid in html[1:]])
  html_forms = replace_node(document, html, new_html)
  if head_kind(html_forms) == HeadKind.HTML:
    html_forms = [html_forms]

  return OutputBundle(
    markup=forms_to_html(html_forms, doctype),
    code=render_module(module_forms, width),
  )


def move_forms_to_body(forms: Sequence[Any]) -> Form:
  """
  Lifts top-level logic forms into the body of the markup document.

  For ``((ns x) expr... (html ...))`` the body gains, before its existing
  children, the namespace declaration and ``(do expr... nil)``. A forest
  that starts with ``html`` is returned as that form, unchanged.

  Args:
      forms (Sequence[Any]): Top-level forms read from a source file.

  Returns:
      Form: The ``html`` document.

  Raises:
      ValueError: If the first form is neither ``ns`` nor ``html``, or the
          final form has no unique body.
  """
  first = forms[0] if forms else None
  kind = head_kind(first)

  if kind == HeadKind.HTML:
    return first

  if kind != HeadKind.NS:
    raise ValueError("First form is not markup or namespace declaration.")

  if len(forms) < 2 or head_kind(forms[-1]) != HeadKind.HTML:
    raise ValueError("The last form of a namespace source must be the (html ...) document.")

  html_forms = process_styles(forms[-1])
  nsdecl, exprs = forms[0], list(forms[1:-1])
  block = make_form("do", *exprs, None)
  body = find_body(html_forms)
  return replace_node(html_forms, body, prepend_children(body, [nsdecl, block]))
