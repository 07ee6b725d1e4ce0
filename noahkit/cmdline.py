"""Splitting a command line into switches and parameters."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ParsedCommand:
    """Words of a command line: switches start with '-', the rest are parameters."""

    options: list[str] = field(default_factory=list)
    params: list[str] = field(default_factory=list)


def parse_command_line(command: str, ignore_first: bool = False) -> ParsedCommand:
    """Split ``command`` on spaces, honouring double quotes.

    A word that begins with a double quote runs to the next double quote;
    otherwise it runs to the next space. Words starting with '-' are switches.
    With ``ignore_first`` the first word (the program name) is dropped.
    """
    result = ParsedCommand()
    pos = 0
    length = len(command)
    skip_next = ignore_first

    while pos < length:
        while pos < length and command[pos] == " ":
            pos += 1

        terminator = " "
        if pos < length and command[pos] == '"':
            terminator = '"'
            pos += 1

        if pos >= length:
            break

        end = command.find(terminator, pos)
        if end == -1:
            end = length
        word = command[pos:end]

        if skip_next:
            skip_next = False
        elif word.startswith("-"):
            result.options.append(word)
        else:
            result.params.append(word)

        pos = end + 1

    return result