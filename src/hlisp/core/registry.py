"""
Tag Registry and Runtime Surface.

Process-wide, read-only tables:

- `HTML_TAGS`: every legal markup head. Names that clash with ClojureScript
  core functions (``map``, ``meta``, ``time``, ``var``) carry an ``html-``
  prefix; ``$text`` and ``$comment`` are pseudo-tags for raw text and comments.
- `RUNTIME_EXPORTS`: the mandatory ``:use`` entry that gives generated modules
  the runtime environment's full capability surface.
"""

from typing import Any, FrozenSet, Tuple

from hlisp.enums import HeadKind
from hlisp.forms.nodes import Form, Keyword, Symbol, Vector, is_form

RUNTIME_NS = "hlisp.env"
INIT_FN = "hlispinit"

_TAG_NAMES = """
a abbr acronym address applet area article aside audio b base basefont bdi
bdo big blockquote body br button canvas caption center cite code col
colgroup command data datalist dd del details dfn dir div dl dt em embed
eventsource fieldset figcaption figure font footer form frame frameset h1 h2
h3 h4 h5 h6 head header hgroup hr html i iframe img input ins isindex kbd
keygen label legend li link html-map mark menu html-meta meter nav noframes
noscript object ol optgroup option output p param pre progress q rp rt ruby s
samp script section select small source span strike strong style sub summary
sup table tbody td textarea tfoot th thead html-time title tr track tt u ul
html-var video wbr $text $comment
""".split()

HTML_TAGS: Tuple[Symbol, ...] = tuple(Symbol(n) for n in _TAG_NAMES)
HTML_TAG_SET: FrozenSet[Symbol] = frozenset(HTML_TAGS)

# Markup names that are spelled with the html- prefix on the forms side.
PREFIXED_TAGS: FrozenSet[str] = frozenset(n[len("html-") :] for n in _TAG_NAMES if n.startswith("html-"))

_RUNTIME_PRIMITIVES = ("text", "pr-node", "tag", "attrs", "branch?", "children", "make-node", "dom", "node-zip", "clone")

RUNTIME_EXPORTS: Vector = Vector(
  [
    Symbol(RUNTIME_NS),
    Keyword("only"),
    Vector(HTML_TAGS + tuple(Symbol(n) for n in _RUNTIME_PRIMITIVES)),
  ]
)

_HEADS = {
  Symbol("ns"): HeadKind.NS,
  Symbol("html"): HeadKind.HTML,
  Symbol("body"): HeadKind.BODY,
  Symbol("style"): HeadKind.STYLE,
  Keyword("use"): HeadKind.USE,
}


def head_kind(node: Any) -> HeadKind:
  """
  Classifies a form by its head.

  Args:
      node: Any forest value.

  Returns:
      HeadKind: The recognized role, or `HeadKind.OTHER` for atoms and
      unrecognized heads.
  """
  if not is_form(node):
    return HeadKind.OTHER
  try:
    return _HEADS.get(node[0], HeadKind.OTHER)
  except TypeError:
    # Unhashable head (e.g. a map literal)
    return HeadKind.OTHER


def is_html_tag(head: Any) -> bool:
  """Checks whether ``head`` is a legal markup tag symbol."""
  return isinstance(head, Symbol) and head in HTML_TAG_SET


def tag_symbol(tag: str) -> Symbol:
  """
  Maps a markup element name to its forms-side symbol (``map`` -> ``html-map``).
  """
  tag = tag.lower()
  return Symbol(f"html-{tag}" if tag in PREFIXED_TAGS else tag)


def tag_name(head: Symbol) -> str:
  """
  Maps a forms-side symbol back to its markup element name (``html-map`` -> ``map``).
  """
  name = head.name
  if name.startswith("html-") and name[len("html-") :] in PREFIXED_TAGS:
    return name[len("html-") :]
  return name


def make_form(head: str, *items: Any) -> Form:
  """Builds ``(head items...)`` with a symbol head."""
  return Form((Symbol(head),) + items)
