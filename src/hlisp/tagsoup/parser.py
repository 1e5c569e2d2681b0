"""
Lenient HTML Parser.

Parses markup using standard library `html.parser` and builds a tag-soup
tree (`hlisp.tagsoup.nodes`) the way a browser-grade tag-soup parser would
for well-formed pages:

1.  Void elements never take children.
2.  Stray end tags are ignored; an end tag closes every element opened after
    its matching start tag.
3.  Missing ``html`` and ``body`` wrappers are synthesized.
4.  Whitespace-only text is dropped outside whitespace-sensitive elements.
5.  Doctype declarations and processing instructions are discarded.
"""

from html.parser import HTMLParser
from typing import List, Optional, Tuple

from hlisp.tagsoup.nodes import (
  PRESERVE_TAGS,
  RAW_TEXT_TAGS,
  VOID_TAGS,
  SoupComment,
  SoupElement,
  SoupNode,
  SoupText,
)

_HEAD_TAGS = frozenset(["base", "link", "meta", "style", "title"])


class SoupBuilder(HTMLParser):
  """
  HTML Parser callback handler.
  Maintains an open-element stack and appends nodes to the innermost element.
  """

  def __init__(self) -> None:
    super().__init__(convert_charrefs=True)
    self.root = SoupElement(tag="#root")
    self.stack: List[SoupElement] = [self.root]

  @property
  def current(self) -> SoupElement:
    return self.stack[-1]

  def _keeps_whitespace(self) -> bool:
    return any(el.tag in PRESERVE_TAGS or el.tag in RAW_TEXT_TAGS for el in self.stack)

  def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    element = SoupElement(tag=tag, attrs=dict(attrs))
    self.current.content.append(element)
    if tag not in VOID_TAGS:
      self.stack.append(element)

  def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    self.current.content.append(SoupElement(tag=tag, attrs=dict(attrs)))

  def handle_endtag(self, tag: str) -> None:
    for idx in range(len(self.stack) - 1, 0, -1):
      if self.stack[idx].tag == tag:
        del self.stack[idx:]
        return

  def handle_data(self, data: str) -> None:
    if not data.strip() and not self._keeps_whitespace():
      return
    content = self.current.content
    if content and isinstance(content[-1], SoupText):
      content[-1] = SoupText(content[-1].text + data)
    else:
      content.append(SoupText(data))

  def handle_comment(self, data: str) -> None:
    self.current.content.append(SoupComment(data))


def _ensure_document(nodes: List[SoupNode]) -> List[SoupNode]:
  html = next((n for n in nodes if isinstance(n, SoupElement) and n.tag == "html"), None)
  if html is None:
    html = SoupElement(tag="html", content=[n for n in nodes if not isinstance(n, SoupComment)])
    nodes = [n for n in nodes if isinstance(n, SoupComment)] + [html]

  if not any(isinstance(n, SoupElement) and n.tag == "body" for n in html.content):
    head_part: List[SoupNode] = []
    body = SoupElement(tag="body")
    for node in html.content:
      if isinstance(node, SoupElement) and (node.tag == "head" or (node.tag in _HEAD_TAGS and not body.content)):
        head_part.append(node)
      else:
        body.content.append(node)
    html.content = head_part + [body]
  return nodes


def parse_string(text: str) -> List[SoupNode]:
  """
  Parses markup text into a tag-soup forest.

  Args:
      text (str): Raw HTML.

  Returns:
      List[SoupNode]: Top-level nodes; exactly one of them is the ``html``
      element, which holds a ``body`` element.
  """
  builder = SoupBuilder()
  builder.feed(text)
  builder.close()
  return _ensure_document(builder.root.content)
