"""
Tests for the Style DSL Compiler.

Verifies:
1. The bracketed single-vector form and the flat alternating form.
2. Selector groups, multiple rule blocks and value rendering.
3. Pass-through of already compiled or raw style blocks.
4. Forest-wide compilation via `process_styles`.
"""

from hlisp.core.styles import clj_to_css, compile_style, process_styles
from hlisp.forms import Form, Keyword, Symbol, read_one


def test_bracketed_stylesheet():
  out = compile_style(read_one('(style [[:div :p] {:color "red"}])'))
  assert out == Form([Symbol("style"), {Keyword("type"): "text/css"}, "div p {\n  color: red;\n}\n"])


def test_flat_alternating_stylesheet():
  out = compile_style(read_one('(style [:div :p] {:color "red"})'))
  assert out[2] == "div p {\n  color: red;\n}\n"


def test_consecutive_selectors_form_a_group():
  css = clj_to_css(list(read_one('[[:h1] [:h2 :em] {:margin 0 :font-weight :bold}]')))
  assert css == "h1,\nh2 em {\n  margin: 0;\n  font-weight: bold;\n}\n"


def test_group_literal_of_paths():
  out = compile_style(read_one('(style [[:ul :li] [:ol :li]] {:list-style "none"})'))
  assert out[2] == "ul li,\nol li {\n  list-style: none;\n}\n"


def test_groups_pair_by_position():
  src = '(style [:a] {:color "blue"} [:a:hover] {:color "navy"} [:body] {:margin 0})'
  assert compile_style(read_one(src))[2] == (
    "a {\n  color: blue;\n}\n\na:hover {\n  color: navy;\n}\n\nbody {\n  margin: 0;\n}\n"
  )


def test_selector_tokens_may_be_strings_or_symbols():
  out = compile_style(read_one('(style ["#main" .item] {:padding "4px"})'))
  assert out[2] == "#main .item {\n  padding: 4px;\n}\n"


def test_trailing_selectors_without_properties_are_dropped():
  assert clj_to_css(list(read_one('[[:a] {:x 1} [:b]]'))) == "a {\n  x: 1;\n}\n"


def test_raw_block_passes_through():
  raw = read_one('(style "body { margin: 0; }")')
  assert compile_style(raw) is raw


def test_compiled_block_is_stable():
  once = compile_style(read_one('(style [:p] {:color "red"})'))
  assert compile_style(once) is once


def test_output_is_deterministic():
  src = '(style [:div] {:a 1 :b 2 :c 3} [:p :span] {:z "x" :y "w"})'
  outputs = {compile_style(read_one(src))[2] for _ in range(5)}
  assert len(outputs) == 1


def test_process_styles_rewrites_nested_blocks():
  doc = read_one('(html (head (style [:p] {:color "red"})) (body (div (style [:b] {:x 1}))))')
  out = process_styles(doc)
  head_style = out[1][1]
  nested_style = out[2][1][1]
  assert head_style[1] == {Keyword("type"): "text/css"}
  assert head_style[2] == "p {\n  color: red;\n}\n"
  assert nested_style[2] == "b {\n  x: 1;\n}\n"
  assert out[0] == Symbol("html")
