"""
Compile Command Handler.

This module implements the logic for the `hlisp compile` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Source discovery (single file or directory tree).
3. Compilation of each source into a page and a module.
4. Output writing (or printing, without an output directory) and a summary.
"""

from pathlib import Path
from typing import Dict, List, Optional

from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from hlisp.compiler import compile_file, handler_for
from hlisp.config import CompilerConfig
from hlisp.core.bundle import OutputBundle
from hlisp.utils.console import console, log_error, log_info, log_success, log_warning


def handle_compile(
  input_path: Path,
  out_dir: Optional[Path] = None,
  js_uri: Optional[str] = None,
  base_uri: Optional[str] = None,
  line_width: Optional[int] = None,
) -> int:
  """
  Handles the 'compile' command execution.

  Args:
      input_path: Source file or directory.
      out_dir: Where to write outputs (overrides config).
      js_uri: Module URI (overrides config).
      base_uri: Closure base URI (overrides config).
      line_width: Pretty printer margin (overrides config).

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = CompilerConfig.load(
      js_uri=js_uri,
      base_uri=base_uri,
      out_dir=out_dir,
      line_width=line_width,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  if input_path.is_file():
    sources = [input_path]
    root = input_path.parent
  else:
    sources = sorted(p for p in input_path.rglob("*") if p.is_file() and handler_for(p))
    root = input_path
    if not sources:
      log_warning(f"No .html or .cljs files found in {input_path}")
      return 0
    log_info(f"Compiling {len(sources)} files from [path]{input_path}[/path]...")

  results: Dict[str, str] = {}
  for src in sources:
    rel = src.relative_to(root)
    results[str(rel)] = _compile_single_file(src, rel, config)

  if len(sources) > 1:
    _print_summary(results)
  return 0 if all(status == "ok" for status in results.values()) else 1


def _compile_single_file(src: Path, rel: Path, config: CompilerConfig) -> str:
  """
  Compiles one source and writes or prints the result.

  Args:
      src: Source path.
      rel: Source path relative to the input root.
      config: Resolved configuration.

  Returns:
      str: ``"ok"``, ``"skipped"`` or ``"error"``.
  """
  try:
    bundle = compile_file(src, config.js_uri, config.base_uri, **config.compile_options)
  except (ValueError, SyntaxError, OSError) as e:
    log_error(f"{src}: {escape(str(e))}")
    return "error"

  if bundle is None:
    log_warning(f"Unsupported file type: {src}")
    return "skipped"

  if config.out_dir is None:
    _print_bundle(src, bundle)
    return "ok"

  dest_dir = config.out_dir / rel.parent
  html_path = dest_dir / f"{src.stem}.html"
  cljs_path = dest_dir / f"{src.stem}.cljs"
  if src.resolve() in (html_path.resolve(), cljs_path.resolve()):
    log_error(f"Refusing to overwrite source file {src}; choose another --out directory.")
    return "error"

  written = bundle.write(dest_dir, src.stem)
  log_success(f"Wrote [path]{written[0]}[/path] and [path]{written[1]}[/path]")
  return "ok"


def _print_bundle(src: Path, bundle: OutputBundle) -> None:
  console.print(f"[bold]{src.stem}.html[/bold]")
  console.print(Syntax(bundle.markup, "html"))
  console.print(f"[bold]{src.stem}.cljs[/bold]")
  console.print(Syntax(bundle.code, "clojure"))


def _print_summary(results: Dict[str, str]) -> None:
  table = Table(title="Compilation Summary")
  table.add_column("Source", style="cyan")
  table.add_column("Status")

  styles = {"ok": "[green]ok[/green]", "skipped": "[yellow]skipped[/yellow]", "error": "[red]error[/red]"}
  rows: List[str] = sorted(results)
  for name in rows:
    table.add_row(name, styles[results[name]])
  console.print(table)
