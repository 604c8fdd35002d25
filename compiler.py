import argparse
import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from triforce.codegen import generate_javascript
from triforce.errors import CompileError
from triforce.lexer import tokenize
from triforce.parser import parse_tokens

__version__ = "0.1.0"

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def compile_source(source: str) -> str:
    """Run scan, parse and codegen over ``source`` and return the JavaScript text."""
    tokens = tokenize(source)
    statements = parse_tokens(tokens)
    return generate_javascript(statements)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="triforce",
        description="TriforceScript compiler: translates .tri sources to JavaScript",
    )
    parser.add_argument("file", type=Path, help="TriforceScript source file")
    parser.add_argument("-o", "--output", type=Path, default=Path("output.js"), help="JavaScript output path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show compilation details")
    parser.add_argument(
        "--run",
        action="store_true",
        help="Also execute the generated code with node (off by default; without it the program is only compiled)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def run_javascript(path: Path) -> int:
    node = shutil.which("node")
    if node is None:
        err_console.print("[red]Cannot run program: 'node' was not found on PATH[/red]")
        return 1
    console.print("\n[blue]Running program:[/blue]")
    console.print("[yellow]-------------------[/yellow]")
    result = subprocess.run([node, str(path)])
    console.print("[yellow]-------------------[/yellow]")
    return result.returncode


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    console.print("[blue]TriforceScript Compiler[/blue]")
    try:
        if args.verbose:
            console.print("[dim]Reading source file...[/dim]")
        source = args.file.read_text(encoding="utf-8")

        if args.verbose:
            console.print("[dim]Lexical analysis...[/dim]")
        tokens = tokenize(source)
        if args.verbose:
            for tok in tokens:
                console.print(
                    f"Token: {tok.type.value} ({tok.value}) at line {tok.line}, column {tok.column}",
                    markup=False,
                    highlight=False,
                    emoji=False,
                )

        if args.verbose:
            console.print("[dim]Parsing...[/dim]")
        statements = parse_tokens(tokens)

        if args.verbose:
            console.print("[dim]Generating JavaScript...[/dim]")
        js_code = generate_javascript(statements)

        args.output.write_text(js_code, encoding="utf-8")
    except (CompileError, OSError, UnicodeDecodeError) as exc:
        err_console.print("[red]Compilation error:[/red]")
        err_console.print(str(exc), style="red", markup=False, highlight=False, emoji=False)
        return 1

    console.print("[green]Compilation finished successfully![/green]")
    console.print(f"[dim]Code written to {args.output}[/dim]")

    if args.run:
        return run_javascript(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
