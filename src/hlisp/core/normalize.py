"""
Tag Normalization.

Guarantees rendered markup only contains legal element names: any head
outside the tag registry is coerced into a ``div``.
"""

from typing import Any

from hlisp.core.registry import is_html_tag
from hlisp.forms.nodes import Form, Symbol, attrs_of, is_form

DIV = Symbol("div")


def htmlize(node: Any) -> Any:
  """
  Normalizes a node and, recursively, its children.

  Only forms carrying an attribute map in second position are element
  nodes; everything else is returned unchanged and not descended into.

  Args:
      node: Any forest value.

  Returns:
      Any: The normalized node.
  """
  if not is_form(node):
    return node
  attrs = attrs_of(node)
  if attrs is None:
    return node
  head = node[0] if is_html_tag(node[0]) else DIV
  kids = [htmlize(kid) for kid in node[2:]]
  return Form([head, attrs] + kids)
