"""
Integration tests for the compilation pipeline.

Verifies:
1. Each entry point produces a page and a module.
2. Path dispatch by extension, including unsupported files.
3. Namespace sources (.cljs) take the reverse-then-forward path.
4. Output stability against stored snapshots.
"""

import pytest

from hlisp import compile_file, compile_string
from hlisp.compiler import compile_cljs_string, compile_tagsoup, handler_for
from hlisp.forms import Symbol, read_string
from hlisp.tagsoup import parse_string

PAGE = """<!DOCTYPE html>
<html>
  <head>
    <title>Counter</title>
  </head>
  <body class="app">
    <script type="text/hlisp">
      (ns counter.page
        (:require [clojure.string :as string]))

      (style [[:h1 :span] {:color "teal"}])

      (h1 "Counter " (span {:id "count"} "0"))
      (panel {:class "controls"}
        (button {:id "inc"} "+"))
    </script>
    <noscript>JavaScript is required.</noscript>
  </body>
</html>
"""

SOURCE = """
(ns todo.app
  (:use [todo.util :only [fmt]]))

(def items (atom []))

(html
  (head (title "Todo"))
  (body {:class "todo"}
    (ul {:id "items"})))
"""


def test_compile_string(snapshot):
  bundle = compile_string(PAGE, "js/main.js", "js/goog/base.js")
  snapshot.assert_match(bundle.markup, "html")
  snapshot.assert_match(bundle.code, "cljs")


def test_compile_string_structure():
  bundle = compile_string(PAGE, "js/main.js")
  assert "<style type=\"text/css\">h1 span {\n  color: teal;\n}\n</style>" in bundle.markup
  assert '<div class="controls">' in bundle.markup
  assert "<noscript>JavaScript is required.</noscript>" in bundle.markup
  assert "text/hlisp" not in bundle.markup
  assert "counter.page.hlispinit();" in bundle.markup

  module = read_string(bundle.code)
  assert module[0][1] == Symbol("counter.page")
  assert "(panel {:class \"controls\"}" in bundle.code


def test_compile_tagsoup_matches_compile_string():
  assert compile_tagsoup(parse_string(PAGE), "main.js") == compile_string(PAGE, "main.js")


def test_compile_options_are_forwarded():
  bundle = compile_string(PAGE, "main.js", doctype=None, width=30)
  assert bundle.markup.startswith("<html>")
  assert max(len(line) for line in bundle.code.splitlines()) < 72


def test_compile_cljs_string():
  bundle = compile_cljs_string(SOURCE, "main.js")
  assert '<body class="todo">' in bundle.markup
  assert '<ul id="items"></ul>' in bundle.markup
  # The logic block is rendered as a container in the static page.
  assert "<div>" in bundle.markup

  module = read_string(bundle.code)
  assert module[0][2][1] == read_string("[todo.util :only [fmt]]")[0]
  init_payload = module[1][4][1]
  assert init_payload[0] == read_string("(do (def items (atom [])) nil)")[0]
  assert init_payload[1] == read_string('(ul {:id "items"})')[0]


def test_compile_cljs_requires_markup_last():
  with pytest.raises(ValueError):
    compile_cljs_string("(ns a.b) (def x 1)", "main.js")


def test_handler_for():
  assert handler_for("page.html") is compile_string
  assert handler_for("src/app.cljs") is compile_cljs_string
  assert handler_for("notes.txt") is None
  assert handler_for("page.html.bak") is None


def test_compile_file_dispatch(tmp_path):
  page = tmp_path / "index.html"
  page.write_text(PAGE, encoding="utf-8")
  source = tmp_path / "todo.cljs"
  source.write_text(SOURCE, encoding="utf-8")

  assert compile_file(page, "main.js") == compile_string(PAGE, "main.js")
  assert compile_file(str(source), "main.js", "base.js") == compile_cljs_string(SOURCE, "main.js", "base.js")


def test_compile_file_unsupported_is_not_read(tmp_path):
  assert compile_file(tmp_path / "missing.txt", "main.js") is None


def test_compile_file_missing_markup(tmp_path):
  with pytest.raises(OSError):
    compile_file(tmp_path / "missing.html", "main.js")


def test_bundle_write(tmp_path):
  bundle = compile_string(PAGE, "main.js")
  html_path, code_path = bundle.write(tmp_path / "out", "index")
  assert html_path.read_text(encoding="utf-8") == bundle.markup
  assert code_path.name == "index.cljs"
  assert code_path.read_text(encoding="utf-8") == bundle.code


def test_compile_cljs_namespace_metadata():
  bundle = compile_cljs_string("(ns ^:figwheel-always app.core) (html (body))", "main.js")
  assert '<script type="text/javascript">app.core.hlispinit();</script>' in bundle.markup
  assert "^:figwheel" not in bundle.markup
