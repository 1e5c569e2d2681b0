"""
Form Tokenizer.

Provides a Regex-based Lexer (`FormLexer`) that decomposes ClojureScript
source text into a stream of typed `Token` objects. Whitespace and commas are
separators; everything else is either structural (brackets, reader macros) or
an atom whose meaning is decided by the reader.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generator, List, Tuple


class TokenType(Enum):
  """Enumeration of form token types."""

  # Structural
  LPAREN = auto()  # (
  RPAREN = auto()  # )
  LBRACKET = auto()  # [
  RBRACKET = auto()  # ]
  LBRACE = auto()  # {
  RBRACE = auto()  # }
  SET_OPEN = auto()  # #{
  FN_OPEN = auto()  # #(

  # Reader macros
  DISCARD = auto()  # #_
  VAR_QUOTE = auto()  # #'
  QUOTE = auto()  # '
  DEREF = auto()  # @

  # Verbatim
  META = auto()  # ^:export, ^String
  REGEX = auto()  # #"[a-z]+"
  CHAR = auto()  # \a, \newline

  # Values
  STRING = auto()  # "text"
  ATOM = auto()  # symbols, keywords, numbers, nil/true/false
  COMMENT = auto()  # ; comment


@dataclass
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind (TokenType): The type of token.
      value (str): The raw string value.
      line (int): Line number in source (1-based).
      column (int): Column number in source (1-based).
  """

  kind: TokenType
  value: str
  line: int
  column: int


_DELIMS = r"\s,()\[\]{}\"@^`~\\;"


class FormLexer:
  """
  Regex-based Lexer for ClojureScript data syntax.
  """

  # Order determines priority
  PATTERNS: List[Tuple[TokenType, str]] = [
    (TokenType.COMMENT, r";[^\n]*"),
    (TokenType.STRING, r'"(?:[^"\\]|\\.)*"'),
    (TokenType.REGEX, r'#"(?:[^"\\]|\\.)*"'),
    (TokenType.SET_OPEN, r"#\{"),
    (TokenType.FN_OPEN, r"#\("),
    (TokenType.DISCARD, r"#_"),
    (TokenType.VAR_QUOTE, r"#'"),
    (TokenType.META, rf"\^[^{_DELIMS}]+"),
    (TokenType.CHAR, r"\\(?:newline|space|tab|return|backspace|formfeed|u[0-9a-fA-F]{4}|.)"),
    (TokenType.LPAREN, r"\("),
    (TokenType.RPAREN, r"\)"),
    (TokenType.LBRACKET, r"\["),
    (TokenType.RBRACKET, r"\]"),
    (TokenType.LBRACE, r"\{"),
    (TokenType.RBRACE, r"\}"),
    (TokenType.QUOTE, r"'"),
    (TokenType.DEREF, r"@"),
    (TokenType.ATOM, rf"[^{_DELIMS}'#][^{_DELIMS}]*"),
  ]

  def __init__(self) -> None:
    """Initializes the lexer with compiled patterns."""
    self.regex_pairs = [(kind, re.compile(pattern, re.S)) for kind, pattern in self.PATTERNS]
    self._ws = re.compile(r"[\s,]+")

  def tokenize(self, text: str) -> Generator[Token, None, None]:
    """
    Tokenizes the input string. Comments are consumed but not yielded.

    Args:
        text (str): Raw source code.

    Yields:
        Token: Token objects.

    Raises:
        SyntaxError: If an unrecognized character sequence is encountered
            (e.g. syntax-quote, which the reader does not support).
    """
    pos = 0
    line_num = 1
    line_start = 0
    length = len(text)

    while pos < length:
      match_ws = self._ws.match(text, pos)
      if match_ws:
        ws_str = match_ws.group(0)
        newlines = ws_str.count("\n")
        if newlines > 0:
          line_num += newlines
          line_start = pos + ws_str.rfind("\n") + 1
        pos += len(ws_str)
        continue

      for kind, regex in self.regex_pairs:
        match = regex.match(text, pos)
        if match:
          val = match.group(0)
          if kind != TokenType.COMMENT:
            yield Token(kind, val, line_num, pos - line_start + 1)

          # Strings may span lines
          newlines = val.count("\n")
          if newlines > 0:
            line_num += newlines
            line_start = pos + val.rfind("\n") + 1
          pos += len(val)
          break
      else:
        snippet = text[pos : min(pos + 10, length)]
        raise SyntaxError(f"Illegal character at line {line_num}, col {pos - line_start + 1}: '{snippet}...'")
