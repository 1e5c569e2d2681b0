"""
Tag-Soup Tree Nodes.

Defines the element tree produced by the lenient HTML parser and consumed by
the HTML emitter:
- SoupElement: A named element with attributes and content.
- SoupText: A run of character data.
- SoupComment: An HTML comment.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Dict, List, Optional

VOID_TAGS = frozenset(
  [
    "area",
    "base",
    "basefont",
    "br",
    "col",
    "command",
    "embed",
    "frame",
    "hr",
    "img",
    "input",
    "isindex",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
  ]
)

# Content is emitted verbatim (no escaping, no re-indentation).
RAW_TEXT_TAGS = frozenset(["script", "style"])
PRESERVE_TAGS = frozenset(["pre", "textarea"])

INDENT = "  "


@dataclass
class SoupNode:
  """
  Abstract base class for all tag-soup nodes.
  """

  def to_html(self, depth: int = 0) -> str:
    """
    Render the node and its children to an HTML string.

    Args:
        depth (int): Nesting level, used for indentation.

    Returns:
        str: The raw HTML content.

    Raises:
        NotImplementedError: If not implemented by subclass.
    """
    raise NotImplementedError


@dataclass
class SoupText(SoupNode):
  """
  Character data.

  Attributes:
      text (str): Unescaped text.
  """

  text: str

  def to_html(self, depth: int = 0) -> str:
    return INDENT * depth + escape(self.text, quote=False)


@dataclass
class SoupComment(SoupNode):
  """
  An HTML comment.

  Attributes:
      text (str): Comment body, without the ``<!--`` / ``-->`` markers.
  """

  text: str

  def to_html(self, depth: int = 0) -> str:
    return f"{INDENT * depth}<!--{self.text}-->"


@dataclass
class SoupElement(SoupNode):
  """
  An element.

  Attributes:
      tag (str): Lower-case element name.
      attrs (Dict[str, Optional[str]]): Attributes in source order. A value of
          None renders as a bare (boolean) attribute.
      content (List[SoupNode]): Child nodes.
  """

  tag: str
  attrs: Dict[str, Optional[str]] = field(default_factory=dict)
  content: List[SoupNode] = field(default_factory=list)

  def _open_tag(self) -> str:
    parts = [self.tag]
    for key, value in self.attrs.items():
      parts.append(key if value is None else f'{key}="{escape(value, quote=True)}"')
    return "<" + " ".join(parts) + ">"

  def raw_text(self) -> str:
    """Concatenated text of all descendant text nodes."""
    chunks = []
    for node in self.content:
      if isinstance(node, SoupText):
        chunks.append(node.text)
      elif isinstance(node, SoupElement):
        chunks.append(node.raw_text())
    return "".join(chunks)

  def to_html(self, depth: int = 0) -> str:
    """
    Renders the element.

    Elements whose children are all text stay on one line; elements with
    element children put each child on its own indented line.
    """
    pad = INDENT * depth
    open_tag = self._open_tag()
    if self.tag in VOID_TAGS:
      return pad + open_tag
    close_tag = f"</{self.tag}>"

    if self.tag in RAW_TEXT_TAGS:
      return pad + open_tag + self.raw_text() + close_tag

    if self.tag in PRESERVE_TAGS or all(isinstance(n, SoupText) for n in self.content):
      inner = "".join(n.to_html(0) for n in self.content)
      return pad + open_tag + inner + close_tag

    lines = [pad + open_tag]
    lines.extend(n.to_html(depth + 1) for n in self.content)
    lines.append(pad + close_tag)
    return "\n".join(lines)

