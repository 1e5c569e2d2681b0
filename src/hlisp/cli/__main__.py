"""
Main Entry Point for hlisp CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `hlisp.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from hlisp.cli import commands
from hlisp import __version__
from hlisp.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="hlisp: HTML + ClojureScript page compiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: COMPILE ---
  cmd_comp = subparsers.add_parser("compile", help="Compile a .html/.cljs page (or a directory of them)")
  cmd_comp.add_argument("path", type=Path, help="Input source file or directory")
  cmd_comp.add_argument("--out", type=Path, default=None, help="Output directory (default: from toml, else print)")
  cmd_comp.add_argument("--js-uri", default=None, help="URI of the compiled module (default: from toml, else main.js)")
  cmd_comp.add_argument("--base-uri", default=None, help="URI of the Closure base script (unoptimized builds)")
  cmd_comp.add_argument("--width", type=int, default=None, help="Right margin of the generated module")

  # --- Command: FORMS ---
  cmd_forms = subparsers.add_parser("forms", help="Print the form forest a source file parses into")
  cmd_forms.add_argument("path", type=Path, help="Input .html or .cljs file")
  cmd_forms.add_argument("--width", type=int, default=72, help="Right margin (default: 72)")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "compile":
    return commands.handle_compile(args.path, args.out, args.js_uri, args.base_uri, args.width)

  elif args.command == "forms":
    return commands.handle_forms(args.path, args.width)

  return 0


if __name__ == "__main__":
  sys.exit(main())
