"""
Shell - Command-line front end for SQLIndent

Reads a SQL statement from the console, a file or the command line,
formats it and prints the result.
"""

import sys
import logging
from typing import Optional, TextIO

from .formatter import FormatError, FormatOptions, UnbalancedPolicy, format_sql


logger = logging.getLogger(__name__)


class FormatShell:
    """
    Interactive shell: prompt, read until end of input, print the result.

    Usage:
        shell = FormatShell()
        exit_code = shell.run()
    """

    PROMPT = (
        "Enter SQL statement to format and press ctrl+D (mac/linux) "
        "or ctrl+Z (windows) when done:"
    )
    EMPTY_INPUT = "No input provided!!"
    RESULT_HEADER = "\n---Formatted SQL---\n"

    def __init__(self, options: Optional[FormatOptions] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.options = options or FormatOptions()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def run(self) -> int:
        """Prompt for a statement on stdin and print it formatted."""
        print(self.PROMPT, file=self.stdout)
        sql = self.stdin.read()

        if not sql.strip():
            print(self.EMPTY_INPUT, file=self.stdout)
            return 0

        formatted = self.format(sql)
        if formatted is None:
            return 1

        print(self.RESULT_HEADER, file=self.stdout)
        print(formatted, file=self.stdout)
        return 0

    def execute(self, sql: str) -> int:
        """Format one statement and print only the result."""
        if not sql.strip():
            print(self.EMPTY_INPUT, file=self.stdout)
            return 0

        formatted = self.format(sql)
        if formatted is None:
            return 1

        print(formatted, file=self.stdout)
        return 0

    def format(self, sql: str) -> Optional[str]:
        """Format SQL, reporting errors on stderr. Returns None on failure."""
        try:
            return format_sql(sql, self.options)
        except FormatError as e:
            logger.debug("Formatting failed", exc_info=True)
            print(f"Error: {e}", file=self.stderr)
            return None


def build_options(indent: Optional[int] = None, clamp: bool = False) -> FormatOptions:
    """Map command-line flags onto FormatOptions."""
    options = FormatOptions()
    if indent is not None:
        if indent < 0:
            raise ValueError("Indent width must not be negative")
        options.indent = ' ' * indent
    if clamp:
        options.on_unbalanced = UnbalancedPolicy.CLAMP
    return options


def main(argv=None) -> int:
    """Entry point for the sqlindent command."""
    import argparse

    parser = argparse.ArgumentParser(
        description="SQLIndent - Re-indent SQL statements for readability"
    )
    parser.add_argument(
        '-e', '--execute',
        help='Format the given SQL statement and exit'
    )
    parser.add_argument(
        '-f', '--file',
        help='Format SQL read from a file and exit'
    )
    parser.add_argument(
        '--indent',
        type=int,
        metavar='N',
        help='Indent with N spaces instead of a tab'
    )
    parser.add_argument(
        '--clamp',
        action='store_true',
        help='Ignore unbalanced closing parentheses instead of failing'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        options = build_options(args.indent, args.clamp)
    except ValueError as e:
        parser.error(str(e))

    shell = FormatShell(options)

    # Format a single statement
    if args.execute is not None:
        return shell.execute(args.execute)

    # Format from file
    if args.file:
        try:
            with open(args.file, 'r') as f:
                sql = f.read()
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return shell.execute(sql)

    # Read from the console
    return shell.run()


if __name__ == '__main__':
    sys.exit(main())
