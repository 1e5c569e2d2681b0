"""
Form Printer.

Renders forest values back to ClojureScript source text, either on a single
line (`dumps`) or pretty printed to a right margin (`pformat`).

Pretty printing rules:
1.  Anything that fits in the remaining width is printed flat.
2.  Symbol-headed lists keep leading atoms (``ns`` names, ``defn`` names,
    metadata, empty parameter vectors) on the head line; every other argument
    goes on its own line, indented two columns.
3.  Vectors of atoms are filled greedily; other collections put one element
    (or one key/value pair) per line, aligned after the opening bracket.
"""

from typing import Any, List, Tuple

from hlisp.forms.nodes import AnonFn, Form, Keyword, Literal, SetForm, Symbol, Vector

_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _quote(text: str) -> str:
  return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in text) + '"'


def _brackets(node: Any) -> Tuple[str, str]:
  if isinstance(node, AnonFn):
    return "#(", ")"
  if isinstance(node, Form):
    return "(", ")"
  if isinstance(node, Vector):
    return "[", "]"
  if isinstance(node, SetForm):
    return "#{", "}"
  return "(", ")"


def dumps(node: Any) -> str:
  """
  Renders a value on a single line.

  Args:
      node: Any forest value.

  Returns:
      str: ClojureScript source text.
  """
  if node is None:
    return "nil"
  if node is True:
    return "true"
  if node is False:
    return "false"
  if isinstance(node, str):
    return _quote(node)
  if isinstance(node, (Symbol, Keyword, Literal)):
    return str(node)
  if isinstance(node, dict):
    pairs = [f"{dumps(k)} {dumps(v)}" for k, v in node.items()]
    return "{" + ", ".join(pairs) + "}"
  if isinstance(node, (tuple, list)):
    opener, closer = _brackets(node)
    return opener + " ".join(dumps(n) for n in node) + closer
  return repr(node) if isinstance(node, float) else str(node)


def _is_coll(node: Any) -> bool:
  return isinstance(node, (tuple, list, dict))


def _keeps_on_head_line(node: Any) -> bool:
  return not _is_coll(node) or (isinstance(node, Vector) and len(node) == 0)


class _PrettyPrinter:
  def __init__(self, width: int) -> None:
    self.width = width

  def fmt(self, node: Any, col: int) -> str:
    flat = dumps(node)
    if col + len(flat) <= self.width or not _is_coll(node) or len(node) == 0:
      return flat
    if isinstance(node, dict):
      return self._fmt_map(node, col)
    if isinstance(node, Form) and isinstance(node[0], Symbol):
      return self._fmt_call(node, col)
    if isinstance(node, Vector) and not any(_is_coll(n) for n in node):
      return self._fmt_fill(node, col)
    return self._fmt_aligned(node, col)

  def _fmt_call(self, node: Form, col: int) -> str:
    opener, closer = _brackets(node)
    head = opener + dumps(node[0])
    args = list(node[1:])
    line_len = col + len(head)
    while args and _keeps_on_head_line(args[0]):
      text = dumps(args[0])
      if line_len + 1 + len(text) > self.width:
        break
      head += " " + text
      line_len += 1 + len(text)
      args.pop(0)
    if not args:
      return head + closer
    pad = " " * (col + 2)
    rest = [pad + self.fmt(a, col + 2) for a in args]
    return head + "\n" + "\n".join(rest) + closer

  def _fmt_aligned(self, node: Any, col: int) -> str:
    opener, closer = _brackets(node)
    inner = col + len(opener)
    pad = " " * inner
    parts = [self.fmt(n, inner) for n in node]
    return opener + ("\n" + pad).join(parts) + closer

  def _fmt_fill(self, node: Any, col: int) -> str:
    opener, closer = _brackets(node)
    inner = col + len(opener)
    lines: List[str] = []
    current = ""
    for item in node:
      text = dumps(item)
      candidate = f"{current} {text}" if current else text
      if current and inner + len(candidate) + len(closer) > self.width:
        lines.append(current)
        current = text
      else:
        current = candidate
    lines.append(current)
    return opener + ("\n" + " " * inner).join(lines) + closer

  def _fmt_map(self, node: dict, col: int) -> str:
    inner = col + 1
    parts = []
    for key, value in node.items():
      k = dumps(key)
      parts.append(f"{k} {self.fmt(value, inner + len(k) + 1)}")
    return "{" + (",\n" + " " * inner).join(parts) + "}"


def pformat(node: Any, width: int = 72, indent: int = 0) -> str:
  """
  Pretty prints a value within a right margin.

  Args:
      node: Any forest value.
      width (int): Right margin in columns.
      indent (int): Column the first line starts at.

  Returns:
      str: Pretty printed source text, without a trailing newline.
  """
  return _PrettyPrinter(width).fmt(node, indent)
