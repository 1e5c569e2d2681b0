"""
hlisp Package.

Compiles HTML pages that embed ClojureScript forms into a static page plus a
generated ClojureScript module that takes over the page at runtime.

Usage
-----

.. code-block:: python

    import hlisp

    page = '''
    <html><body>
      <script type="text/hlisp">
        (ns hello.core)
        (style [:h1] {:color "red"})
      </script>
      <h1>Hello</h1>
    </body></html>
    '''
    bundle = hlisp.compile_string(page, "main.js")
    print(bundle.markup)  # page with bootstrap scripts
    print(bundle.code)    # (ns hello.core (:use [hlisp.env ...])) ...
"""

from hlisp.compiler import (
  compile_cljs_string,
  compile_file,
  compile_forms,
  compile_string,
  compile_tagsoup,
)
from hlisp.config import CompilerConfig
from hlisp.core.bundle import OutputBundle
from hlisp.core.document import move_forms_to_body

__version__ = "0.1.0"

__all__ = [
  "CompilerConfig",
  "OutputBundle",
  "compile_cljs_string",
  "compile_file",
  "compile_forms",
  "compile_string",
  "compile_tagsoup",
  "move_forms_to_body",
  "__version__",
]
