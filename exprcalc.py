#!/usr/bin/env python3
"""
exprcalc.py — ExprCalc command line tool.

Thin wrapper around expression_evaluator: reads an expression, prints the
result or the error. Runs fully locally.

Configuration: environment variables with the EXPR_CALC_ prefix
or a .env file (e.g. EXPR_CALC_LOG_LEVEL=DEBUG).

Subcommands:
    eval    — evaluate an expression (optionally with computation steps)
    tokens  — show the token list after unary-chain reduction
    check   — list every syntax rule the expression breaks
    repl    — read expressions line by line until EOF or an empty line

Usage:
    python exprcalc.py eval --text "3 + 4 * 5"
    python exprcalc.py eval --steps --text "-(3 + --5) * 2"
    echo "3/2/2" | python exprcalc.py eval
    python exprcalc.py tokens --text "3 --+- 5"
    python exprcalc.py check --text "(3 4"
    python exprcalc.py repl
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Step")
    for idx, step in enumerate(steps, 1):
        table.add_row(str(idx), _safe_terminal_text(step))
    _console().print(table)


def _print_issues_table(issues: list[Any]) -> None:
    table = Table(title=f"Issues [{len(issues)}]", box=box.ASCII, show_lines=False)
    table.add_column("Code", no_wrap=True, style="bold red")
    table.add_column("Pos", justify="right", no_wrap=True)
    table.add_column("Token", no_wrap=True)
    table.add_column("Message")
    for issue in issues:
        table.add_row(
            issue.code.value,
            "-" if issue.position is None else str(issue.position),
            _safe_terminal_text(issue.token or "-"),
            _safe_terminal_text(issue.message),
        )
    _console().print(table)


def _fail(exc: Exception) -> None:
    code = getattr(exc, "code", None)
    prefix = f"[{code.value}] " if code is not None else ""
    print(f"Error: {prefix}{exc}", file=sys.stderr)
    sys.exit(1)


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None)
    if text is None:
        text = sys.stdin.read()
    return text


# -- commands --------------------------------------------------------------

def _eval(args: argparse.Namespace) -> None:
    from contracts import ExpressionError
    from expression_evaluator import evaluate_detailed, format_value

    text = _read_text(args)
    try:
        result = evaluate_detailed(text)
    except (ExpressionError, RecursionError) as exc:
        _fail(exc)
        return

    _console().print(f"Result: {format_value(result.value)}")
    if args.steps:
        _print_steps_table(result.steps)


def _tokens(args: argparse.Namespace) -> None:
    from adapters.expression_parser.span_split_parser import SpanSplitParser
    from contracts import LexicalError

    try:
        tokens = SpanSplitParser().tokens(_read_text(args))
    except LexicalError as exc:
        _fail(exc)
        return
    _console().print(" ".join(tokens) if tokens else "(no tokens)")


def _check(args: argparse.Namespace) -> None:
    from adapters.expression_parser.span_split_parser import SpanSplitParser
    from contracts import LexicalError

    parser = SpanSplitParser()
    try:
        issues = parser.validator.find_issues(parser.tokens(_read_text(args)))
    except LexicalError as exc:
        issues = [exc.to_issue()]

    if not issues:
        _console().print("OK: no issues found.")
        return
    _print_issues_table(issues)
    sys.exit(1)


def _repl(args: argparse.Namespace) -> None:
    from contracts import ExpressionError
    from expression_evaluator import evaluate, format_value

    print("Enter an expression per line (empty line or EOF to quit):")
    for line in sys.stdin:
        if not line.strip():
            break
        try:
            print(f"Result: {format_value(evaluate(line))}")
        except (ExpressionError, RecursionError) as exc:
            print(f"Error: {exc}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="ExprCalc — arithmetic expression evaluator",
    )
    parser.add_argument("--log-level", default=None,
                        help="Overrides EXPR_CALC_LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Evaluate an expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Show computation steps")

    # tokens
    p = sub.add_parser("tokens", help="Show tokens after unary-chain reduction")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    # check
    p = sub.add_parser("check", help="List every syntax rule the expression breaks")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    # repl
    sub.add_parser("repl", help="Evaluate expressions line by line")

    args = parser.parse_args(argv)

    from config import Settings
    logging.basicConfig(level=(args.log_level or Settings().log_level).upper())

    cmds = {
        "eval":   _eval,
        "tokens": _tokens,
        "check":  _check,
        "repl":   _repl,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
