"""
Form Reader.

Recursive descent parser turning the `FormLexer` token stream into forest
values (see `hlisp.forms.nodes`). Supports the data subset of the
ClojureScript reader that hlisp sources use.
"""

import re
from typing import Any, Dict, List, Optional

from hlisp.forms.nodes import AnonFn, Form, Keyword, Literal, SetForm, Symbol, Vector
from hlisp.forms.printer import dumps
from hlisp.forms.tokens import FormLexer, Token, TokenType

_INT = re.compile(r"[-+]?\d+")
_HEX = re.compile(r"[-+]?0[xX][0-9a-fA-F]+")
_FLOAT = re.compile(r"[-+]?(\d+\.\d*([eE][-+]?\d+)?|\d+[eE][-+]?\d+)")
_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f"}

_CLOSERS = {
  TokenType.LPAREN: TokenType.RPAREN,
  TokenType.FN_OPEN: TokenType.RPAREN,
  TokenType.LBRACKET: TokenType.RBRACKET,
  TokenType.SET_OPEN: TokenType.RBRACE,
  TokenType.LBRACE: TokenType.RBRACE,
}

_WRAPPERS = {
  TokenType.QUOTE: "quote",
  TokenType.DEREF: "deref",
  TokenType.VAR_QUOTE: "var",
}


def _unescape(body: str) -> str:
  def sub(match: "re.Match[str]") -> str:
    esc = match.group(1)
    if esc.startswith("u"):
      return chr(int(esc[1:], 16))
    return _ESCAPES.get(esc, esc)

  return re.sub(r"\\(u[0-9a-fA-F]{4}|.)", sub, body, flags=re.S)


def read_atom(text: str) -> Any:
  """
  Classifies an ATOM token.

  Args:
      text (str): Raw token text.

  Returns:
      Any: None, bool, int, float, Keyword, Symbol or (for numeric forms
      Python has no type for, such as ``1/2`` or ``1N``) a Literal.
  """
  if text == "nil":
    return None
  if text == "true":
    return True
  if text == "false":
    return False
  if _HEX.fullmatch(text):
    return int(text, 16)
  if _INT.fullmatch(text):
    return int(text)
  if _FLOAT.fullmatch(text):
    return float(text)
  if text[0].isdigit() or (len(text) > 1 and text[0] in "+-" and text[1].isdigit()):
    return Literal(text)
  if text.startswith("::"):
    return Literal(text)
  if text.startswith(":"):
    return Keyword(text[1:])
  return Symbol(text)


class FormReader:
  """
  Recursive descent parser for ClojureScript data syntax.
  """

  def __init__(self, code: str) -> None:
    """
    Initialize the reader.

    Args:
        code (str): The raw source string.
    """
    self.lexer = FormLexer()
    self.tokens = list(self.lexer.tokenize(code))
    self.pos = 0

  def read_all(self) -> List[Any]:
    """
    Reads every top-level form.

    Returns:
        List[Any]: Top-level forms in source order.
    """
    forms: List[Any] = []
    while not self._is_eof():
      if self._match(TokenType.DISCARD):
        self._consume()
        self._read()
        continue
      forms.append(self._read())
    return forms

  # --- Recursive Descent Implementation ---

  def _peek(self) -> Optional[Token]:
    if self.pos < len(self.tokens):
      return self.tokens[self.pos]
    return None

  def _consume(self) -> Token:
    token = self._peek()
    if not token:
      raise SyntaxError("Unexpected End of File.")
    self.pos += 1
    return token

  def _is_eof(self) -> bool:
    return self.pos >= len(self.tokens)

  def _match(self, kind: TokenType) -> bool:
    token = self._peek()
    return token is not None and token.kind == kind

  def _read(self) -> Any:
    token = self._consume()
    kind = token.kind

    if kind in _CLOSERS:
      items = self._read_until(token, _CLOSERS[kind])
      if kind == TokenType.LPAREN:
        return Form(items)
      if kind == TokenType.FN_OPEN:
        return AnonFn(items)
      if kind == TokenType.LBRACKET:
        return Vector(items)
      if kind == TokenType.SET_OPEN:
        return SetForm(items)
      return self._to_map(token, items)

    if kind in _WRAPPERS:
      return Form([Symbol(_WRAPPERS[kind]), self._read()])

    if kind == TokenType.DISCARD:
      self._read()
      return self._read()

    if kind == TokenType.STRING:
      return _unescape(token.value[1:-1])

    if kind in (TokenType.META, TokenType.REGEX, TokenType.CHAR):
      return Literal(token.value)

    if kind == TokenType.ATOM:
      return read_atom(token.value)

    raise SyntaxError(f"Unexpected token '{token.value}' at line {token.line}, col {token.column}")

  def _read_until(self, opener: Token, closer: TokenType) -> List[Any]:
    items: List[Any] = []
    while True:
      token = self._peek()
      if token is None:
        raise SyntaxError(f"Unexpected EOF: '{opener.value}' opened at line {opener.line}, col {opener.column} is never closed")
      if token.kind == closer:
        self.pos += 1
        return items
      if token.kind == TokenType.DISCARD:
        self.pos += 1
        self._read()
        continue
      items.append(self._read())

  def _to_map(self, opener: Token, items: List[Any]) -> Dict[Any, Any]:
    where = f"line {opener.line}, col {opener.column}"
    if len(items) % 2:
      raise SyntaxError(f"Map literal at {where} has an odd number of forms")
    result: Dict[Any, Any] = {}
    for key, value in zip(items[::2], items[1::2]):
      try:
        # Also true for keys Python considers equal (true and 1, 1 and 1.0)
        duplicate = key in result
      except TypeError:
        raise SyntaxError(f"Map literal at {where} has a key that cannot be a map key: {dumps(key)}")
      if duplicate:
        raise SyntaxError(f"Map literal at {where} has a duplicate key: {dumps(key)}")
      result[key] = value
    return result


def read_string(text: str) -> List[Any]:
  """
  Reads all top-level forms from source text.

  Args:
      text (str): ClojureScript source.

  Returns:
      List[Any]: The forms, in order.

  Raises:
      SyntaxError: On malformed input.
  """
  return FormReader(text).read_all()


def read_one(text: str) -> Any:
  """
  Reads exactly one form from source text.

  Raises:
      SyntaxError: If the text holds zero or several forms.
  """
  forms = read_string(text)
  if len(forms) != 1:
    raise SyntaxError(f"Expected exactly one form, found {len(forms)}")
  return forms[0]
