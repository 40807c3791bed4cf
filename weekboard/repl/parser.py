"""
FILE: weekboard/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
  - VALUE_FLAGS (flags that take a value)
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: add "Anna Maria"
  - Supports flags: --json, --out plan.xlsx, --out=plan.xlsx
  - Only VALUE_FLAGS take a value; every other flag is boolean, so
    "add --yes Anna" keeps Anna as an argument
  - Preserves argument order for positional args
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Union

# Flags that take the following token as their value
VALUE_FLAGS = {"out", "template", "search"}


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "toggle", "undo")
        args: Positional arguments (e.g., ["0", "mon"])
        flags: Flag arguments as dict (e.g., {"out": "plan.xlsx", "yes": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, Union[str, bool]] = field(default_factory=dict)
    raw_input: str = ""


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Anna")
        ParseResult(command='add', args=['Anna'], flags={}, raw_input='add Anna')

        >>> parse_command('rename 0 "Anna Maria"').args
        ['0', 'Anna Maria']

        >>> parse_command("export --out plan.xlsx").flags
        {'out': 'plan.xlsx'}

    Notes:
        - Command is always the first token (case-insensitive)
        - Flags start with -- (e.g., --out, --yes)
        - Boolean flags don't need values (--yes sets yes=True)
        - Value flags (VALUE_FLAGS) take the next token unless it is
          another flag, or an inline value: --out=plan.xlsx
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", args=[], flags={}, raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        # Unclosed quote: fall back to plain whitespace split
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", args=[], flags={}, raw_input=input_str)

    command = tokens[0].lower()

    args = []
    flags = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if token.startswith("--"):
            flag_name, sep, value = token[2:].partition("=")
            if sep:
                flags[flag_name] = value
                i += 1
            elif (flag_name in VALUE_FLAGS and i + 1 < len(tokens)
                    and not tokens[i + 1].startswith("--")):
                flags[flag_name] = tokens[i + 1]
                i += 2
            else:
                flags[flag_name] = True
                i += 1
        else:
            args.append(token)
            i += 1

    return ParseResult(
        command=command,
        args=args,
        flags=flags,
        raw_input=input_str
    )
