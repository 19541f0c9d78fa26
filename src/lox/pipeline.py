"""Scan-and-parse pipeline for Lox expressions."""

from pathlib import Path
from dataclasses import field, dataclass

from .ast import Expr
from .lexer import Lexer
from .parser import Parser, ParseError
from .tokens import Token


@dataclass
class FrontendResult:
  """Result of running the front end over one source string."""

  success: bool
  tokens: list[Token] = field(default_factory=list)
  expr: Expr | None = None
  errors: list[str] = field(default_factory=list)

  @property
  def error(self) -> str | None:
    return "\n".join(self.errors) if self.errors else None


class Frontend:
  """Runs the scanner and parser, collecting every diagnostic."""

  def run(self, source: str) -> FrontendResult:
    tokens: list[Token] = []
    expr: Expr | None = None
    errors: list[str] = []

    try:
      lexer = Lexer(source)
      tokens = lexer.tokenize()
      errors.extend(str(e) for e in lexer.errors)
      expr = Parser(tokens).parse()
    except ParseError as e:
      errors.extend(e.errors)
      expr = e.expr
    except Exception as e:
      errors.append(f"Internal error: {e}")

    return FrontendResult(success=not errors, tokens=tokens, expr=expr, errors=errors)


def run_source(source: str) -> FrontendResult:
  """Convenience function to scan and parse a source string."""
  return Frontend().run(source)


def run_file(path: Path) -> FrontendResult:
  """Scan and parse the contents of a file."""
  return Frontend().run(path.read_text())
