"""
Tag-Soup <-> Forms Conversion.

Bridges the element tree of `hlisp.tagsoup.nodes` and the form forest the
compiler rewrites:

- `soup_to_forms`: elements become ``(tag {attrs} child*)``, text becomes
  plain strings, comments become ``($comment "...")``. The content of
  ``<script type="text/hlisp">`` elements is read as forms and spliced into
  the parent in place of the element.
- `forms_to_soup`: the inverse, used to render the compiled page.
- `pedanticize`: canonicalizes a form so every element carries an
  attribute map.
- `render_html`: emits the final HTML text.
"""

from typing import Any, Dict, Iterable, List, Optional

from hlisp.core.registry import tag_name, tag_symbol
from hlisp.forms.nodes import Form, Keyword, Symbol, attrs_of, children_of, is_form, name_of
from hlisp.forms.printer import dumps
from hlisp.forms.reader import read_string
from hlisp.tagsoup.nodes import SoupComment, SoupElement, SoupNode, SoupText

HLISP_SCRIPT_TYPE = "text/hlisp"

TEXT = Symbol("$text")
COMMENT = Symbol("$comment")


def _node_to_forms(node: SoupNode) -> List[Any]:
  if isinstance(node, SoupText):
    return [node.text]
  if isinstance(node, SoupComment):
    return [Form([COMMENT, node.text])]
  if not isinstance(node, SoupElement):
    raise TypeError(f"Unknown tag-soup node: {node!r}")

  if node.tag == "script" and node.attrs.get("type") == HLISP_SCRIPT_TYPE:
    return read_string(node.raw_text())

  attrs = {Keyword(k): (True if v is None else v) for k, v in node.attrs.items()}
  return [Form([tag_symbol(node.tag), attrs] + soup_to_forms(node.content))]


def soup_to_forms(nodes: Iterable[SoupNode]) -> List[Any]:
  """
  Converts a tag-soup forest into forms.

  Args:
      nodes (Iterable[SoupNode]): Parsed nodes.

  Returns:
      List[Any]: The form forest (hlisp scripts expanded in place).
  """
  result: List[Any] = []
  for node in nodes:
    result.extend(_node_to_forms(node))
  return result


def _attr_value(value: Any) -> Optional[str]:
  if value is True:
    return None
  if isinstance(value, dict):
    return " ".join(f"{name_of(k)}: {name_of(v)};" for k, v in value.items())
  if isinstance(value, (tuple, list)):
    return dumps(value)
  return name_of(value)


def _attrs_to_soup(attrs: Dict[Any, Any]) -> Dict[str, Optional[str]]:
  return {name_of(k): _attr_value(v) for k, v in attrs.items() if v is not False and v is not None}


def forms_to_soup(node: Any) -> List[SoupNode]:
  """
  Converts one form (or atom) into tag-soup nodes.

  Args:
      node: Any forest value.

  Returns:
      List[SoupNode]: Zero nodes for ``nil``, otherwise one.
  """
  if node is None:
    return []
  if isinstance(node, str):
    return [SoupText(node)]
  if is_form(node) and isinstance(node[0], Symbol):
    head = node[0]
    if head == TEXT:
      return [SoupText("".join(name_of(k) for k in children_of(node)))]
    if head == COMMENT:
      return [SoupComment("".join(name_of(k) for k in children_of(node)))]
    content: List[SoupNode] = []
    for kid in children_of(node):
      content.extend(forms_to_soup(kid))
    return [SoupElement(tag=tag_name(head), attrs=_attrs_to_soup(attrs_of(node) or {}), content=content)]
  if isinstance(node, (tuple, list, dict)):
    return [SoupText(dumps(node))]
  return [SoupText(name_of(node))]


def pedanticize(node: Any) -> Any:
  """
  Gives every symbol-headed form an attribute map, recursively.

  ``(p "x" (b "y"))`` becomes ``(p {} "x" (b {} "y"))``. Text and comment
  pseudo-elements, atoms and other collections are returned unchanged.

  Args:
      node: Any forest value.

  Returns:
      Any: The canonical form.
  """
  if not is_form(node) or not isinstance(node[0], Symbol) or node[0] in (TEXT, COMMENT):
    return node
  attrs = attrs_of(node)
  kids = [pedanticize(k) for k in children_of(node)]
  return Form([node[0], {} if attrs is None else attrs] + kids)


def render_html(forest: Iterable[SoupNode], doctype: Optional[str] = "html") -> str:
  """
  Emits HTML text for a tag-soup forest.

  Args:
      forest (Iterable[SoupNode]): Top-level nodes.
      doctype (Optional[str]): Doctype name; None or empty omits the line.

  Returns:
      str: The document, newline terminated.
  """
  lines = [f"<!DOCTYPE {doctype}>"] if doctype else []
  lines.extend(node.to_html(0) for node in forest)
  return "\n".join(lines) + "\n"


def forms_to_html(forest: Iterable[Any], doctype: Optional[str] = "html") -> str:
  """
  Renders a form forest as HTML text.

  Args:
      forest (Iterable[Any]): Top-level forms.
      doctype (Optional[str]): Doctype name.

  Returns:
      str: The document.
  """
  soup: List[SoupNode] = []
  for node in forest:
    soup.extend(forms_to_soup(node))
  return render_html(soup, doctype)
