"""Token definitions for the Lox expression language."""

from enum import Enum, auto
from dataclasses import dataclass

# Literal payload: str, bool, float, or None when absent
Value = str | bool | float | None


class TokenType(Enum):
  # Single-character tokens
  LEFT_PAREN = auto()
  RIGHT_PAREN = auto()
  LEFT_BRACE = auto()
  RIGHT_BRACE = auto()
  COMMA = auto()
  DOT = auto()
  MINUS = auto()
  PLUS = auto()
  SEMICOLON = auto()
  SLASH = auto()
  STAR = auto()

  # One or two character tokens
  BANG = auto()
  BANG_EQUAL = auto()
  EQUAL = auto()
  EQUAL_EQUAL = auto()
  GREATER = auto()
  GREATER_EQUAL = auto()
  LESS = auto()
  LESS_EQUAL = auto()

  # Literals
  IDENTIFIER = auto()
  STRING = auto()
  NUMBER = auto()

  # Keywords
  AND = auto()
  CLASS = auto()
  ELSE = auto()
  FUN = auto()
  FOR = auto()
  IF = auto()
  NIL = auto()
  OR = auto()
  PRINT = auto()
  RETURN = auto()
  SUPER = auto()
  THIS = auto()
  TRUE = auto()
  FALSE = auto()
  VAR = auto()
  WHILE = auto()

  # End of file
  EOF = auto()


KEYWORDS: dict[str, TokenType] = {
  "and": TokenType.AND,
  "class": TokenType.CLASS,
  "else": TokenType.ELSE,
  "fun": TokenType.FUN,
  "for": TokenType.FOR,
  "if": TokenType.IF,
  "nil": TokenType.NIL,
  "or": TokenType.OR,
  "print": TokenType.PRINT,
  "return": TokenType.RETURN,
  "super": TokenType.SUPER,
  "this": TokenType.THIS,
  "true": TokenType.TRUE,
  "false": TokenType.FALSE,
  "var": TokenType.VAR,
  "while": TokenType.WHILE,
}


@dataclass(frozen=True, slots=True)
class Token:
  type: TokenType
  lexeme: str | None
  literal: Value
  line: int

  def __repr__(self) -> str:
    return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
