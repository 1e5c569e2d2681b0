"""
Symbolic-Expression Data Model.

Defines the value types that make up a form forest:

- `Symbol` / `Keyword`: Named atoms (``div``, ``:color``).
- `Form`: A parenthesised list, the compound node ``(head attrs? child*)``.
- `Vector` / `SetForm` / `AnonFn`: The remaining bracketed collections.
- `Literal`: Reader syntax kept verbatim (characters, regexes, metadata).

Maps are plain ``dict`` instances; strings, numbers, booleans and ``None``
(``nil``) are used as-is. All collection types are tuples, so a forest is an
immutable value tree.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class Symbol:
  """
  A symbolic name (e.g. ``div``, ``hlisp.env/init``).

  Attributes:
      name (str): The symbol text.
  """

  name: str

  def __str__(self) -> str:
    return self.name


@dataclass(frozen=True)
class Keyword:
  """
  A keyword (e.g. ``:use``). The stored name excludes the leading colon.

  Attributes:
      name (str): The keyword text without ``:``.
  """

  name: str

  def __str__(self) -> str:
    return f":{self.name}"


@dataclass(frozen=True)
class Literal:
  """
  Reader syntax carried through verbatim (``\\c``, ``#"re"``, ``^:export``).

  Attributes:
      text (str): The exact source text.
  """

  text: str

  def __str__(self) -> str:
    return self.text


class _Collection(tuple):
  """
  Base for bracketed collections.

  Equality is type-strict so that ``(a b)`` never compares equal to ``[a b]``.
  """

  def __new__(cls, items: Iterable[Any] = ()) -> "_Collection":
    return super().__new__(cls, items)

  def __eq__(self, other: object) -> bool:
    return type(other) is type(self) and tuple.__eq__(self, other)

  def __ne__(self, other: object) -> bool:
    return not self.__eq__(other)

  __hash__ = tuple.__hash__

  def __add__(self, other: Iterable[Any]) -> "_Collection":
    return type(self)(tuple(self) + tuple(other))

  def __getitem__(self, index):
    result = tuple.__getitem__(self, index)
    if isinstance(index, slice):
      return type(self)(result)
    return result

  def __repr__(self) -> str:
    from hlisp.forms.printer import dumps

    return f"{type(self).__name__}<{dumps(self)}>"


class Form(_Collection):
  """A list form: ``(head arg ...)``."""


class Vector(_Collection):
  """A vector literal: ``[a b c]``."""


class SetForm(_Collection):
  """A set literal: ``#{a b}``. Element order is preserved."""


class AnonFn(Form):
  """An anonymous function literal: ``#(f %)``."""


def is_form(node: Any) -> bool:
  """
  Checks whether a node is a non-empty list form.

  Args:
      node: Any forest value.

  Returns:
      bool: True for ``(head ...)`` forms.
  """
  return isinstance(node, Form) and len(node) > 0


def attrs_of(node: Form) -> Optional[Dict[Any, Any]]:
  """
  Returns the attribute map of a compound node, if it has one.

  Args:
      node (Form): A list form.

  Returns:
      Optional[Dict]: The dict in second position, or None.
  """
  if len(node) > 1 and isinstance(node[1], dict):
    return node[1]
  return None


def children_of(node: Form) -> Form:
  """
  Returns the children of a compound node, skipping head and attributes.

  Args:
      node (Form): A list form.

  Returns:
      Form: The remaining items.
  """
  return node[2:] if attrs_of(node) is not None else node[1:]


def name_of(value: Any) -> str:
  """
  Textual name of an atom, as used in CSS and attribute rendering.

  Symbols and keywords yield their bare name, strings are returned
  unchanged, anything else is converted with ``str``.
  """
  if isinstance(value, (Symbol, Keyword)):
    return value.name
  if isinstance(value, bool):
    return "true" if value else "false"
  return str(value)
