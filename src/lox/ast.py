"""AST node definitions for Lox expressions."""

from dataclasses import dataclass

from .tokens import Token, Value


@dataclass(frozen=True, slots=True)
class Literal:
  """Literal like 42, "hi", true or nil."""

  value: Value


@dataclass(frozen=True, slots=True)
class Grouping:
  """Parenthesized expression like (a + b)."""

  expression: "Expr"


@dataclass(frozen=True, slots=True)
class Unary:
  """Prefix expression like -x or !ok."""

  operator: Token
  right: "Expr"


@dataclass(frozen=True, slots=True)
class Binary:
  """Binary expression like a + b or x < y."""

  left: "Expr"
  operator: Token
  right: "Expr"


@dataclass(frozen=True, slots=True)
class Empty:
  """Placeholder where an operand was expected but none was found."""


Expr = Literal | Grouping | Unary | Binary | Empty
