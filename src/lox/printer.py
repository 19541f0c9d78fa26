"""Debug renderers for token lists and expression trees."""

from .ast import Expr, Unary, Binary, Empty, Literal, Grouping
from .tokens import Token, Value


def format_value(value: Value) -> str:
  """Render a literal value the way it would be written in source."""
  if value is None:
    return "nil"
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, float):
    return str(int(value)) if value.is_integer() else repr(value)
  return f'"{value}"'


def format_token(token: Token) -> str:
  """Format one token as ``line: TYPE lexeme [-> literal]``."""
  text = f"{token.line}: {token.type.name}"
  if token.lexeme is not None:
    text += f" {token.lexeme}"
  if token.literal is not None:
    text += f" -> {format_value(token.literal)}"
  return text


def format_tokens(tokens: list[Token]) -> str:
  return "\n".join(format_token(t) for t in tokens)


def to_sexpr(expr: Expr) -> str:
  """Render an expression as a parenthesized prefix string, e.g. (+ 1 (* 2 3))."""
  parts: list[str] = []
  # Pending work: nodes still to render, or text to emit as is
  stack: list[Expr | str] = [expr]
  while stack:
    item = stack.pop()
    match item:
      case str():
        parts.append(item)
      case Literal(value):
        parts.append(format_value(value))
      case Grouping(inner):
        stack.extend([")", inner, "(group "])
      case Unary(op, right):
        stack.extend([")", right, f"({op.lexeme} "])
      case Binary(left, op, right):
        stack.extend([")", right, " ", left, f"({op.lexeme} "])
      case Empty():
        parts.append("<empty>")
      case _:
        raise TypeError(f"Unknown expression node: {item!r}")
  return "".join(parts)


def dump(expr: Expr, indent: int = 0) -> str:
  """Render an expression as an indented tree, one node per line."""
  lines: list[str] = []
  stack: list[tuple[Expr, int]] = [(expr, indent)]
  while stack:
    node, level = stack.pop()
    pad = "  " * level
    match node:
      case Literal(value):
        lines.append(f"{pad}Literal {format_value(value)}")
      case Grouping(inner):
        lines.append(f"{pad}Grouping")
        stack.append((inner, level + 1))
      case Unary(op, right):
        lines.append(f"{pad}Unary {op.lexeme}")
        stack.append((right, level + 1))
      case Binary(left, op, right):
        lines.append(f"{pad}Binary {op.lexeme}")
        stack.extend([(right, level + 1), (left, level + 1)])
      case Empty():
        lines.append(f"{pad}Empty")
      case _:
        raise TypeError(f"Unknown expression node: {node!r}")
  return "\n".join(lines)
