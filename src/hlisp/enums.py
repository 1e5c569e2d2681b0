"""
Enumerations for hlisp.

Defines the closed set of head kinds the compiler dispatches on when it
inspects a form.
"""

from enum import Enum


class HeadKind(str, Enum):
  """
  Role of a form, decided by its head.

  Anything not listed is `OTHER`; callers decide whether that passes through
  (style compilation) or is fatal (reverse assembly).
  """

  NS = "ns"  # namespace declaration
  HTML = "html"  # markup document root
  BODY = "body"  # body container
  STYLE = "style"  # style block
  USE = "use"  # (:use ...) import clause
  OTHER = "other"
