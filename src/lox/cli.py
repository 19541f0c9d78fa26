"""Command-line interface for the Lox expression front end."""

import sys
import argparse
from pathlib import Path

from .printer import dump, to_sexpr, format_tokens
from .pipeline import Frontend, FrontendResult


def _report(result: FrontendResult, args: argparse.Namespace) -> int:
  """Print the requested dumps for one result and return an exit status."""
  if args.tokens:
    print(format_tokens(result.tokens))

  if not args.no_tree and result.expr is not None:
    print(dump(result.expr) if args.tree == "dump" else to_sexpr(result.expr))

  for error in result.errors:
    print(f"Error: {error}", file=sys.stderr)
  return 0 if result.success else 1


def _repl(frontend: Frontend, args: argparse.Namespace) -> int:
  """Read expressions line by line until end of input."""
  while True:
    try:
      line = input("> ")
    except EOFError:
      print()
      return 0

    if line.strip() in ("exit", "quit"):
      return 0
    if not line.strip():
      continue
    _report(frontend.run(line), args)


def main(argv: list[str] | None = None) -> int:
  """Main entry point for the lox command."""
  parser = argparse.ArgumentParser(
    prog="lox",
    description="Scan and parse Lox expressions, printing the tokens and syntax tree",
  )
  parser.add_argument("source", type=Path, nargs="?", help="Source file to parse (omit for an interactive prompt)")
  parser.add_argument("--tokens", action="store_true", help="Print the token list")
  parser.add_argument(
    "--tree",
    choices=("sexpr", "dump"),
    default="sexpr",
    help="Tree format: parenthesized prefix form or indented dump (default: sexpr)",
  )
  parser.add_argument("--no-tree", action="store_true", help="Do not print the syntax tree")

  args = parser.parse_args(argv)
  frontend = Frontend()

  if args.source is None:
    return _repl(frontend, args)

  if not args.source.exists():
    print(f"Error: Source file '{args.source}' not found", file=sys.stderr)
    return 1

  return _report(frontend.run(args.source.read_text()), args)


if __name__ == "__main__":
  sys.exit(main())
