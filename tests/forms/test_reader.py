"""
Tests for the Form Reader.

Verifies:
1. Atom classification (nil/booleans, numbers, keywords, symbols, strings).
2. Collection literals and their distinct types.
3. Reader macros and verbatim literals.
4. Error reporting for malformed input.
"""

import pytest

from hlisp.forms import AnonFn, Form, Keyword, Literal, SetForm, Symbol, Vector, read_one, read_string


def test_atoms():
  forms = read_string('nil true false 42 -7 0x1F 1.5 2e3 :color foo/bar "hi"')
  assert forms == [None, True, False, 42, -7, 31, 1.5, 2000.0, Keyword("color"), Symbol("foo/bar"), "hi"]


def test_string_escapes():
  assert read_one(r'"a\"b\\c\ndA"') == 'a"b\\c\ndA'


def test_multiline_string_keeps_newlines():
  assert read_one('"line one\nline two"') == "line one\nline two"


def test_collection_types_are_distinct():
  lst = read_one("(a b)")
  vec = read_one("[a b]")
  assert isinstance(lst, Form)
  assert isinstance(vec, Vector)
  assert lst != vec
  assert list(lst) == list(vec)


def test_map_preserves_insertion_order():
  m = read_one('{:b 1, :a 2 :c "x"}')
  assert list(m.keys()) == [Keyword("b"), Keyword("a"), Keyword("c")]
  assert m[Keyword("c")] == "x"


def test_nested_document():
  doc = read_one('(html (body {:class "x"} (div {} "hello")))')
  assert doc[0] == Symbol("html")
  body = doc[1]
  assert body[0] == Symbol("body")
  assert body[1] == {Keyword("class"): "x"}
  assert body[2] == Form([Symbol("div"), {}, "hello"])


def test_reader_macros():
  assert read_one("'x") == Form([Symbol("quote"), Symbol("x")])
  assert read_one("@state") == Form([Symbol("deref"), Symbol("state")])
  assert read_one("#'foo") == Form([Symbol("var"), Symbol("foo")])


def test_set_and_anonymous_fn():
  s = read_one("#{1 2}")
  f = read_one("#(inc %)")
  assert isinstance(s, SetForm) and tuple(s) == (1, 2)
  assert isinstance(f, AnonFn) and f[0] == Symbol("inc")


def test_verbatim_literals():
  forms = read_string(r'\a \newline #"[a-z]+" ^:export 1/2')
  assert forms == [Literal(r"\a"), Literal(r"\newline"), Literal('#"[a-z]+"'), Literal("^:export"), Literal("1/2")]


def test_comments_and_discard_are_skipped():
  forms = read_string(
    """
    ; leading comment
    (a #_ignored b) ; trailing
    #_(whole form)
    c
    """
  )
  assert forms == [Form([Symbol("a"), Symbol("b")]), Symbol("c")]


def test_commas_are_whitespace():
  assert read_one("[1,2,,3]") == Vector([1, 2, 3])


def test_unclosed_form_reports_position():
  with pytest.raises(SyntaxError) as excinfo:
    read_string("(ns foo\n  (:use [a])")
  assert "line 1" in str(excinfo.value)


def test_unbalanced_closer():
  with pytest.raises(SyntaxError):
    read_string("(a))")


def test_odd_map_literal():
  with pytest.raises(SyntaxError):
    read_one("{:a}")


def test_syntax_quote_is_rejected():
  with pytest.raises(SyntaxError) as excinfo:
    read_string("`(a ~b)")
  assert "Illegal character" in str(excinfo.value)


def test_read_one_requires_single_form():
  with pytest.raises(SyntaxError):
    read_one("a b")


@pytest.mark.parametrize("src", ["{:a 1 :a 2}", '{1 "a" true "b"}', "{1 :x 1.0 :y}"])
def test_duplicate_map_keys(src):
  with pytest.raises(SyntaxError) as excinfo:
    read_one(src)
  assert "duplicate key" in str(excinfo.value)


def test_unhashable_map_key():
  with pytest.raises(SyntaxError) as excinfo:
    read_string("(div\n  {[{:a 1}] 2})")
  assert "line 2, col 3" in str(excinfo.value)
