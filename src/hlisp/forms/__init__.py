"""
Symbolic-Expression Forms Package.

Data model, reader and printer for the ClojureScript-flavoured forms that
hlisp documents are made of.
"""

from hlisp.forms.nodes import (
  AnonFn,
  Form,
  Keyword,
  Literal,
  SetForm,
  Symbol,
  Vector,
  attrs_of,
  children_of,
  is_form,
  name_of,
)
from hlisp.forms.printer import dumps, pformat
from hlisp.forms.reader import read_one, read_string

__all__ = [
  "AnonFn",
  "Form",
  "Keyword",
  "Literal",
  "SetForm",
  "Symbol",
  "Vector",
  "attrs_of",
  "children_of",
  "dumps",
  "is_form",
  "name_of",
  "pformat",
  "read_one",
  "read_string",
]
