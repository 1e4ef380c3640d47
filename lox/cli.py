"""
Command line driver for the Lox scanner.

    lox              # interactive prompt, one scan per line
    lox script.lox   # scan a file and print its tokens

Exit codes follow the BSD sysexits convention: 64 for bad usage,
65 when the script contains a lexical error and 66 when it cannot
be read.

Author: xwest
"""

import sys
from typing import Optional, TextIO

import click

from .lexer import Lexer, LexerError
from .version import __version__

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


class Lox:
    """A driver session: runs sources and tracks whether an error was reported."""

    def __init__(self):
        self.had_error = False

    def run(self, source: str, filename: str = "<stdin>"):
        """Scan one source text and echo its tokens, or report the first error."""
        try:
            tokens = Lexer(source, filename).scan_tokens()
        except LexerError as e:
            self.error(e.line, e.message)
            return

        for token in tokens:
            click.echo(str(token))

    def run_file(self, path: str) -> int:
        """Run a script file and return the process exit code."""
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()

        self.run(source, path)
        return EX_DATAERR if self.had_error else 0

    def run_prompt(self, stream: Optional[TextIO] = None) -> int:
        """Read-scan-print loop until end of input."""
        stream = stream or sys.stdin

        while True:
            click.echo("> ", nl=False)
            line = stream.readline()
            if not line:
                click.echo()
                return 0

            self.run(line.strip())
            # One bad line must not poison the rest of the session
            self.had_error = False

    def error(self, line: int, message: str):
        self.report(line, "", message)

    def report(self, line: int, where: str, message: str):
        click.echo(f"[line {line}] Error {where}: {message}", err=True)
        self.had_error = True


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.version_option(version=__version__, prog_name="lox")
def main(args):
    """Scan a Lox script, or start an interactive prompt when none is given."""
    if len(args) > 1:
        click.echo("Usage: lox [script]", err=True)
        sys.exit(EX_USAGE)

    session = Lox()
    if args:
        try:
            status = session.run_file(args[0])
        except OSError as e:
            click.echo(f"Can't read file {args[0]}: {e.strerror}", err=True)
            sys.exit(EX_NOINPUT)
        sys.exit(status)
    sys.exit(session.run_prompt())


if __name__ == "__main__":
    main()
