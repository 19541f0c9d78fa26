"""Recursive descent parser for Lox expressions."""

from collections.abc import Callable

from .ast import Expr, Unary, Binary, Empty, Literal, Grouping
from .tokens import Token, TokenType


class ParseError(Exception):
  """Raised after parsing when one or more syntax errors were recorded."""

  def __init__(self, errors: list[str], expr: Expr) -> None:
    super().__init__("\n".join(errors))
    self.errors = errors
    self.expr = expr


# Operator sets for each precedence level, lowest to highest
EQUALITY_OPS: frozenset[TokenType] = frozenset({TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL})
COMPARISON_OPS: frozenset[TokenType] = frozenset(
  {
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
  }
)
TERM_OPS: frozenset[TokenType] = frozenset({TokenType.MINUS, TokenType.PLUS})
FACTOR_OPS: frozenset[TokenType] = frozenset({TokenType.SLASH, TokenType.STAR})
UNARY_OPS: frozenset[TokenType] = frozenset({TokenType.BANG, TokenType.MINUS})

LITERAL_TYPES: frozenset[TokenType] = frozenset(
  {
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NIL,
    TokenType.STRING,
    TokenType.NUMBER,
  }
)

# Deepest parenthesized nesting accepted before reporting an error
MAX_NESTING = 64


class Parser:
  """Parses a token list into a single expression tree.

  Syntax errors are collected in ``errors`` while descending; every level
  still returns a best-effort node so the rest of the input is attempted.
  """

  def __init__(self, tokens: list[Token]) -> None:
    self.tokens = tokens
    self.pos = 0
    self.depth = 0
    self.errors: list[str] = []

  def _current(self) -> Token:
    return self.tokens[self.pos]

  def _previous(self) -> Token:
    return self.tokens[self.pos - 1]

  def _at_end(self) -> bool:
    return self._current().type == TokenType.EOF

  def _advance(self) -> Token:
    if not self._at_end():
      self.pos += 1
    return self._previous()

  def _check(self, type: TokenType) -> bool:
    return self._current().type == type

  def _match(self, types: frozenset[TokenType]) -> bool:
    if self._current().type not in types:
      return False
    self._advance()
    return True

  def _consume(self, type: TokenType, message: str) -> None:
    token = self._current()
    if token.type == type:
      self._advance()
    else:
      self.errors.append(f"line {token.line}: {message}")

  # === Parsing Functions ===

  def parse(self) -> Expr:
    """Parse one expression, raising ParseError if any errors were recorded."""
    expr = self._parse_expression()
    if self.errors:
      raise ParseError(self.errors, expr)
    return expr

  def _parse_expression(self) -> Expr:
    return self._parse_equality()

  def _parse_binary(self, ops: frozenset[TokenType], operand: Callable[[], Expr]) -> Expr:
    """Parse a left-associative chain of ``operand (op operand)*``."""
    expr = operand()
    while self._match(ops):
      operator = self._previous()
      right = operand()
      expr = Binary(expr, operator, right)
    return expr

  def _parse_equality(self) -> Expr:
    return self._parse_binary(EQUALITY_OPS, self._parse_comparison)

  def _parse_comparison(self) -> Expr:
    return self._parse_binary(COMPARISON_OPS, self._parse_term)

  def _parse_term(self) -> Expr:
    return self._parse_binary(TERM_OPS, self._parse_factor)

  def _parse_factor(self) -> Expr:
    return self._parse_binary(FACTOR_OPS, self._parse_unary)

  def _parse_unary(self) -> Expr:
    """Parse prefix operators; ``--x`` nests as ``Unary(-, Unary(-, x))``."""
    operators: list[Token] = []
    while self._match(UNARY_OPS):
      operators.append(self._previous())
    expr = self._parse_primary()
    for operator in reversed(operators):
      expr = Unary(operator, expr)
    return expr

  def _parse_primary(self) -> Expr:
    if self._match(LITERAL_TYPES):
      token = self._previous()
      if token.type == TokenType.NIL:
        return Literal(None)
      return Literal(token.literal)

    if self._check(TokenType.LEFT_PAREN):
      opening = self._advance()
      if self.depth >= MAX_NESTING:
        self.errors.append(f"line {opening.line}: expression nested too deeply")
        self._skip_group()
        return Empty()

      self.depth += 1
      inner = self._parse_expression()
      self.depth -= 1
      self._consume(TokenType.RIGHT_PAREN, "expecting ')'")
      return Grouping(inner)

    return Empty()

  def _skip_group(self) -> None:
    """Skip past the ')' that closes an already consumed '('."""
    open_parens = 1
    while open_parens and not self._at_end():
      match self._advance().type:
        case TokenType.LEFT_PAREN:
          open_parens += 1
        case TokenType.RIGHT_PAREN:
          open_parens -= 1


def parse(tokens: list[Token]) -> Expr:
  """Convenience function to parse a token list."""
  return Parser(tokens).parse()
