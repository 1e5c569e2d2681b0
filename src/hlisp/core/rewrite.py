"""
Tree Rewriting.

`update_by` is the single locate-and-replace primitive of the compiler. It
walks a forest depth-first and substitutes every node accepted by a predicate
with the result of a rewrite function, rebuilding containers bottom-up.
"""

from typing import Any, Callable

Predicate = Callable[[Any], bool]
Rewrite = Callable[[Any], Any]


def update_by(root: Any, pred: Predicate, fn: Rewrite) -> Any:
  """
  Replaces every node matching ``pred`` with ``fn(node)``.

  Sequences of every kind (lists, vectors, sets, plain Python lists and
  tuples) are descended into, the root included. Maps and atoms are leaves.
  A replacement is not scanned again, so ``fn`` may return a node that
  itself satisfies ``pred``.

  Args:
      root: The forest root (a single node or a sequence of nodes).
      pred: Predicate selecting nodes to replace.
      fn: Pure function producing the replacement.

  Returns:
      Any: A new forest with the same container types as ``root``.
  """
  if pred(root):
    return fn(root)
  if isinstance(root, (tuple, list)):
    return type(root)(update_by(node, pred, fn) for node in root)
  return root


def replace_node(root: Any, target: Any, replacement: Any) -> Any:
  """
  Substitutes one exact node (by identity) with ``replacement``.

  Args:
      root: The forest root.
      target: The node object to replace.
      replacement: The new node.

  Returns:
      Any: A new forest.
  """
  return update_by(root, lambda node: node is target, lambda _: replacement)
