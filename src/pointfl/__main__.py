## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# pointfl — Curried, point-free transformations and lenses over JSON documents.
#

import sys
import json
import traceback
from typing import Any, Callable
from dataclasses import dataclass

import click

from .errors import PointError, PointParseError, PointNameError, PointImportError
from .parser import format_parse_error_context
from .formatting import write_without_ansi, format_result, format_signature, parse_value
from .logger import logger, set_level

from . import api


@dataclass(frozen=True)
class RunnerConfig:
    verbose: int
    ignore: bool
    plain: bool
    indent: int | None


class PointRunner:
    def __init__(self, config: RunnerConfig):
        self.ignore = config.ignore
        self.indent = config.indent
        self.verbose = config.verbose

        if config.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer
        if config.verbose:
            set_level('DEBUG')

        self.runtime = api._RUNTIME
        self.failure = False

    def _maybe_fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '') -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        self.failure = True
        if not self.ignore: sys.exit(1)

    def _handle_exception(self, exc: Exception, source: str, filename: str) -> None:
        if isinstance(exc, PointParseError):
            context = format_parse_error_context(exc.filename or '<EXPR>', exc.line, exc.column, exc.token, source=source)
            context += f"\n\033[90m{str(exc).replace(chr(10), ' ').replace(chr(9), ' ')}\033[0m\n"
            self._maybe_fatal_error("SYNTAX ERROR.", f"Parsing {exc.kind} `\033[97m{source}\033[0m` caused a problem!", type(exc).__name__, context)
        elif isinstance(exc, PointNameError):
            detail = f"Function `\033[1;97m{exc.point_token}\033[0m` from `\033[97m{filename}\033[0m` was not found in library!"
            self._maybe_fatal_error("NAME ERROR.", detail, type(exc).__name__)
        elif isinstance(exc, PointImportError):
            detail = f"Importing module failed while resolving `{exc.point_token}`: \033[97m{exc.filename}\033[0m"
            tb_lines = traceback.format_exception(exc.__cause__ if exc.__cause__ else exc, chain=False)
            traceback_text = ''.join([line for line in tb_lines if "src/pointfl/" not in line and "<frozen" not in line]).rstrip() + '\n'
            self._maybe_fatal_error("IMPORT ERROR.", detail, type(exc).__name__, '\n' + traceback_text)
        elif isinstance(exc, json.JSONDecodeError):
            detail = f"Document `\033[97m{filename}\033[0m` is not valid JSON, line {exc.lineno} column {exc.colno}."
            self._maybe_fatal_error("INPUT ERROR.", detail, type(exc).__name__)
        else:
            where = f" in `\033[1;97m{exc.point_token}\033[0m`" if isinstance(exc, PointError) and exc.point_token else ''
            context = traceback.format_exc() if self.verbose else f"\033[90m{exc}\033[0m\n"
            self._maybe_fatal_error("RUNTIME ERROR.", f"Evaluating `\033[97m{source}\033[0m`{where} raised an error!", type(exc).__name__, context)

    def execute(self, action: Callable[[Any], Any], source: str, document) -> None:
        filename = getattr(document, 'name', None) or '<STDIN>'
        try:
            data = json.load(document)
            logger.debug("Loaded document from %s", filename)
            print(format_result(action(data), indent=self.indent))
        except Exception as exc:
            self._handle_exception(exc, source, filename)

    def finalize(self) -> int:
        return 1 if self.failure and not self.ignore else 0


_document = click.argument('document', type=click.File('r', encoding='utf-8'), default='-')


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--verbose', '-v', default=0, count=True, help='Log debug information and show full tracebacks.')
@click.option('--ignore', '-i', is_flag=True, help='Report errors but exit with success.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--indent', default=None, type=int, help='Indent JSON output by this many spaces.')
@click.pass_context
def cli(ctx: click.Context, verbose: int, ignore: bool, plain: bool, indent: int | None) -> None:
    """Apply point-free expressions and lenses to JSON documents."""
    ctx.ensure_object(dict)
    ctx.obj['config'] = RunnerConfig(verbose=verbose, ignore=ignore, plain=plain, indent=indent)


@cli.command('run')
@click.argument('expression')
@_document
@click.pass_context
def run_expression(ctx: click.Context, expression: str, document) -> None:
    """Apply EXPRESSION, e.g. `pluck("qty") | sum`, to the document."""
    runner = PointRunner(ctx.obj['config'])
    runner.execute(lambda data: runner.runtime.run(expression, data, filename='<EXPR>'), expression, document)
    ctx.exit(runner.finalize())


@cli.command('view')
@click.argument('path')
@_document
@click.pass_context
def view_path(ctx: click.Context, path: str, document) -> None:
    """Print the value at PATH, e.g. `items[0].name` or `items.0.name`."""
    runner = PointRunner(ctx.obj['config'])
    runner.execute(lambda data: runner.runtime.view_path(path, data), path, document)
    ctx.exit(runner.finalize())


@cli.command('set')
@click.argument('path')
@click.argument('value')
@_document
@click.pass_context
def set_path(ctx: click.Context, path: str, value: str, document) -> None:
    """Print the document with VALUE (JSON, or else a string) stored at PATH."""
    runner = PointRunner(ctx.obj['config'])
    runner.execute(lambda data: runner.runtime.set_path(path, parse_value(value), data), path, document)
    ctx.exit(runner.finalize())


@cli.command('over')
@click.argument('path')
@click.argument('expression')
@_document
@click.pass_context
def over_path(ctx: click.Context, path: str, expression: str, document) -> None:
    """Print the document with EXPRESSION applied to the value at PATH."""
    runner = PointRunner(ctx.obj['config'])
    runner.execute(lambda data: runner.runtime.over_path(path, expression, data), expression, document)
    ctx.exit(runner.finalize())


@cli.command('list')
@click.pass_context
def list_functions(ctx: click.Context) -> None:
    """List the functions available to expressions, with their arity."""
    runner = PointRunner(ctx.obj['config'])
    for name, meta in runner.runtime.list_functions().items():
        print(format_signature(name, meta))
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='pointfl')


if __name__ == "__main__":
    main()
