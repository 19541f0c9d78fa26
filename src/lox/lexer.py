"""Single-pass scanner for the Lox expression language."""

from .tokens import KEYWORDS, Token, TokenType, Value

SIMPLE_TOKENS: dict[str, TokenType] = {
  "(": TokenType.LEFT_PAREN,
  ")": TokenType.RIGHT_PAREN,
  "{": TokenType.LEFT_BRACE,
  "}": TokenType.RIGHT_BRACE,
  ",": TokenType.COMMA,
  ".": TokenType.DOT,
  "-": TokenType.MINUS,
  "+": TokenType.PLUS,
  ";": TokenType.SEMICOLON,
  "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by '='
TWO_CHAR_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
  "!": (TokenType.BANG_EQUAL, TokenType.BANG),
  "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
  "<": (TokenType.LESS_EQUAL, TokenType.LESS),
  ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


class LexerError(Exception):
  """Recorded when the lexer finds text it cannot turn into a value."""

  def __init__(self, message: str, line: int) -> None:
    super().__init__(f"line {line}: {message}")
    self.line = line


class Lexer:
  """Tokenizes Lox source code.

  Scanning is lenient: an unterminated string runs to the end of input and
  any unrecognized character ends the token stream. Malformed numbers are
  recorded in ``errors`` and do not stop the scan.
  """

  def __init__(self, source: str) -> None:
    self.source = source
    self.pos = 0
    self.start = 0
    self.line = 1
    self.errors: list[LexerError] = []

  def _at_end(self) -> bool:
    return self.pos >= len(self.source)

  def _current(self) -> str:
    return self.source[self.pos] if self.pos < len(self.source) else ""

  def _advance(self) -> str:
    ch = self._current()
    self.pos += 1
    if ch == "\n":
      self.line += 1
    return ch

  def _match(self, expected: str) -> bool:
    if self._current() != expected:
      return False
    self._advance()
    return True

  def _lexeme(self) -> str:
    return self.source[self.start : self.pos]

  def _make(self, type: TokenType, literal: Value = None) -> Token:
    return Token(type, self._lexeme(), literal, self.line)

  def _skip_whitespace(self) -> None:
    while not self._at_end() and self._current().isspace():
      self._advance()

  def _skip_comment(self) -> None:
    while not self._at_end() and self._current() not in ("\n", "\r"):
      self._advance()

  def _read_string(self) -> Token:
    """Read a string literal; the payload is the text between the quotes."""
    while not self._at_end() and self._current() != '"':
      self._advance()
    value = self.source[self.start + 1 : self.pos]
    self._match('"')
    return self._make(TokenType.STRING, value)

  def _read_number(self) -> Token:
    """Read digits with at most one decimal point."""
    decimal = False
    while not self._at_end():
      ch = self._current()
      if ch.isdigit():
        self._advance()
      elif ch == "." and not decimal:
        decimal = True
        self._advance()
      else:
        break
    text = self._lexeme()
    try:
      value: float | None = float(text)
    except ValueError:
      self.errors.append(LexerError(f"invalid number literal '{text}'", self.line))
      value = None
    return self._make(TokenType.NUMBER, value)

  def _read_identifier(self) -> Token:
    while not self._at_end() and (self._current().isalnum() or self._current() == "-"):
      self._advance()
    text = self._lexeme()
    type = KEYWORDS.get(text, TokenType.IDENTIFIER)
    match type:
      case TokenType.TRUE:
        return self._make(type, True)
      case TokenType.FALSE:
        return self._make(type, False)
      case _:
        return self._make(type, text)

  def _next_token(self) -> Token:
    """Scan one token, skipping whitespace and comments."""
    while True:
      self._skip_whitespace()
      self.start = self.pos
      if self._at_end():
        return Token(TokenType.EOF, None, None, self.line)

      ch = self._advance()
      match ch:
        case c if c in SIMPLE_TOKENS:
          return self._make(SIMPLE_TOKENS[c])
        case c if c in TWO_CHAR_TOKENS:
          two_type, one_type = TWO_CHAR_TOKENS[c]
          return self._make(two_type if self._match("=") else one_type)
        case "/":
          if self._match("/"):
            self._skip_comment()
            continue
          return self._make(TokenType.SLASH)
        case '"':
          return self._read_string()
        case c if c.isdigit():
          return self._read_number()
        case c if c.isalpha():
          return self._read_identifier()
        case _:
          # Anything unrecognized ends the stream
          return self._make(TokenType.EOF)

  def tokenize(self) -> list[Token]:
    """Tokenize the entire source and return a list of tokens ending in EOF."""
    tokens: list[Token] = []
    while True:
      token = self._next_token()
      tokens.append(token)
      if token.type == TokenType.EOF:
        return tokens


def tokenize(source: str) -> list[Token]:
  """Convenience function to tokenize source code."""
  return Lexer(source).tokenize()
