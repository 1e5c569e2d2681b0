"""
Tests for Tag Normalization.

Verifies:
1. Unknown heads become ``div`` with attributes and children preserved.
2. Nodes without an attribute map are left alone (and not descended into).
3. Normalization is idempotent and closes the tree over the tag registry.
"""

from hypothesis import given, settings, strategies as st

from hlisp.core.normalize import htmlize
from hlisp.core.registry import HTML_TAG_SET, is_html_tag
from hlisp.forms import Form, Keyword, Symbol, read_one

heads = st.sampled_from([Symbol(n) for n in ("div", "p", "span", "foo", "widget", "html-map", "ns")])
attr_maps = st.dictionaries(st.sampled_from([Keyword("id"), Keyword("class")]), st.text(max_size=3), max_size=2)
elements = st.recursive(
  st.text(max_size=4),
  lambda children: st.builds(lambda h, a, kids: Form([h, a] + kids), heads, attr_maps, st.lists(children, max_size=3)),
  max_leaves=15,
)


def _heads(node):
  if isinstance(node, Form) and len(node) > 1 and isinstance(node[1], dict):
    yield node[0]
    for kid in node[2:]:
      yield from _heads(kid)


def test_unknown_head_becomes_div():
  assert htmlize(read_one('(foo {} "x")')) == read_one('(div {} "x")')


def test_attributes_and_children_are_preserved():
  out = htmlize(read_one('(card {:class "c"} (title {} "t") (body-text {} "b"))'))
  assert out == read_one('(div {:class "c"} (title {} "t") (div {} "b"))')


def test_known_heads_are_kept():
  src = read_one('(ul {} (li {} "a") (html-map {:name "m"}))')
  assert htmlize(src) == src


def test_node_without_attributes_is_untouched():
  node = read_one("(println (foo {} 1))")
  assert htmlize(node) is node


def test_atoms_pass_through():
  assert htmlize("text") == "text"
  assert htmlize(None) is None
  assert htmlize(Symbol("x")) == Symbol("x")


@given(tree=elements)
@settings(max_examples=100)
def test_idempotent(tree):
  once = htmlize(tree)
  assert htmlize(once) == once


@given(tree=elements)
@settings(max_examples=100)
def test_output_heads_are_registered(tree):
  for head in _heads(htmlize(tree)):
    assert is_html_tag(head)
    assert head in HTML_TAG_SET
