"""Interpreter for Rythp, a tiny parenthesised scripting language.

A Rythp expression is ``function arg arg ...``. An argument in parentheses
is evaluated as a nested expression; an argument in double quotes may hold
spaces. Inside plain arguments ``%c`` is replaced by the value of the
one-character variable ``c``. Every value is a string; numeric functions
read their arguments as 32-bit signed integers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from noahkit.paths import replace_to_slash

Argument = tuple[str, bool]

_WHITESPACE = " \t\r\n"
_INT_CHARS = frozenset("0123456789,-")


def _wrap(number: int) -> int:
    """Reduce ``number`` to the range of a 32-bit signed integer."""
    return (number + 2**31) % 2**32 - 2**31


def _is_int_str(text: str) -> bool:
    return all(ch in _INT_CHARS for ch in text)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _flag(condition: bool) -> str:
    return "1" if condition else "0"


def to_int(text: str) -> int:
    """Read ``text`` as a decimal integer with an optional leading '-'.

    Anything that is not made of digits only reads as 0.
    """
    minus = text.startswith("-")
    digits = text[1:] if minus else text
    if not all("0" <= ch <= "9" for ch in digits):
        return 0
    value = _wrap(int(digits)) if digits else 0
    return _wrap(-value) if minus else value


def quote(text: str) -> str:
    """Put double quotes around ``text`` if it holds a space and is not quoted."""
    if text.startswith('"') or " " not in text:
        return text
    return f'"{text}"'


def unquote(text: str) -> str:
    """Remove a pair of double quotes around ``text`` if it has one."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def _find_end(text: str, pos: int) -> int | None:
    """Find where the argument starting at ``pos`` ends, or None if unbalanced."""
    depth = 0
    quotes = 0
    length = len(text)
    while pos < length and depth >= 0:
        ch = text[pos]
        in_quotes = quotes % 2 == 1
        if ch == "(" and not in_quotes:
            depth += 1
        elif ch == ")" and not in_quotes:
            depth -= 1
        elif ch == '"':
            quotes += 1
        elif ch == "%":
            pos += 1
        elif ch in _WHITESPACE and depth == 0 and not in_quotes:
            return pos
        pos += 1
    if depth == 0 and quotes % 2 == 0:
        return pos
    return None


def split_args(text: str) -> list[Argument]:
    """Split an expression into ``(text, is_expression)`` pairs.

    Surrounding parentheses or quotes are removed from an argument.
    Raises ValueError when parentheses or quotes do not balance.
    """
    args: list[Argument] = []
    length = len(text)
    pos = 0
    while True:
        while pos < length and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= length:
            break
        start = pos
        end = _find_end(text, start)
        if end is None:
            raise ValueError(f"unbalanced expression: {text!r}")
        if text[start] in '("':
            arg = text[start + 1:end - 1]
        else:
            arg = text[start:end]
        args.append((arg, text[start] == "("))
        if end >= length:
            break
        pos = end + 1
    return args


class RythpVM:
    """Evaluator with the minimal built-in function set and 1-char variables.

    Subclasses may add functions by overriding :meth:`exec_function` and
    falling back to the base implementation for names they do not handle.
    """

    def __init__(self) -> None:
        self._vars: dict[str, str] = {
            "%": "%",
            "(": "(",
            ")": ")",
            '"': '"',
            "/": "\n",
        }
        self._functions: dict[str, Callable[[Sequence[Argument]], str]] = {
            "exec": self._exec,
            "while": self._while,
            "if": self._if,
            "let": self._let,
            "=": self._equal,
            "between": self._between,
            "<": self._less,
            ">": self._greater,
            "!": self._not,
            "+": self._add,
            "-": self._subtract,
            "*": self._multiply,
            "/": self._divide,
            "mod": self._mod,
            "slash": self._slash,
        }

    def variable(self, key: str) -> str:
        """Return the value of variable ``key`` ("" if never set)."""
        return self._vars.get(key, "")

    def eval(self, text: str) -> str:
        """Evaluate an expression and return its result.

        Malformed expressions and unknown functions give "".
        """
        try:
            args = split_args(text)
        except ValueError:
            return ""
        if not args:
            return ""
        name = self.getarg(*args[0])
        result = self.exec_function(name, args[1:])
        return "" if result is None else result

    def getarg(self, arg: str, is_expr: bool) -> str:
        """Evaluate an argument or substitute the variables in it."""
        if is_expr:
            return self.eval(arg)
        parts: list[str] = []
        chars = iter(arg)
        for ch in chars:
            if ch == "%":
                parts.append(self.variable(next(chars, "")))
            else:
                parts.append(ch)
        return "".join(parts)

    def exec_function(self, name: str, args: Sequence[Argument]) -> str | None:
        """Run function ``name`` on ``args``; return None if it is unknown."""
        handler = self._functions.get(name)
        return None if handler is None else handler(args)

    # -- built-in functions -------------------------------------------------

    def _value(self, arg: Argument) -> int:
        return to_int(self.getarg(*arg))

    def _exec(self, args: Sequence[Argument]) -> str:
        result = ""
        for arg in args:
            result = self.getarg(*arg)
        return result

    def _while(self, args: Sequence[Argument]) -> str:
        result = ""
        if len(args) >= 2:
            while self._value(args[0]) != 0:
                result = self.getarg(*args[1])
        return result

    def _if(self, args: Sequence[Argument]) -> str:
        if len(args) >= 2:
            if self._value(args[0]) != 0:
                return self.getarg(*args[1])
            if len(args) >= 3:
                return self.getarg(*args[2])
        return ""

    def _let(self, args: Sequence[Argument]) -> str:
        if not args:
            return ""
        value = "".join(self.getarg(*arg) for arg in args[1:])
        self._vars[args[0][0][:1]] = value
        return value

    def _compare_equal(self, first: Argument, second: Argument) -> bool:
        left = self.getarg(*first)
        right = self.getarg(*second)
        if _is_int_str(left) and _is_int_str(right):
            return to_int(left) == to_int(right)
        return left == right

    def _equal(self, args: Sequence[Argument]) -> str:
        if len(args) >= 2:
            return _flag(self._compare_equal(args[0], args[1]))
        return ""

    def _between(self, args: Sequence[Argument]) -> str:
        if len(args) >= 3:
            low, value, high = (self._value(arg) for arg in args[:3])
            return _flag(low <= value <= high)
        return ""

    def _less(self, args: Sequence[Argument]) -> str:
        if len(args) >= 2:
            return _flag(self._value(args[0]) < self._value(args[1]))
        return ""

    def _greater(self, args: Sequence[Argument]) -> str:
        if len(args) >= 2:
            return _flag(self._value(args[0]) > self._value(args[1]))
        return ""

    def _not(self, args: Sequence[Argument]) -> str:
        if not args:
            return ""
        first = self._value(args[0])
        if len(args) == 1:
            return _flag(first == 0)
        return _flag(not self._compare_equal(args[0], args[1]))

    def _add(self, args: Sequence[Argument]) -> str:
        total = 0
        for arg in args:
            total = _wrap(total + self._value(arg))
        return str(total)

    def _subtract(self, args: Sequence[Argument]) -> str:
        if not args:
            return "0"
        value = self._value(args[0])
        if len(args) == 1:
            return str(_wrap(-value))
        for arg in args[1:]:
            value = _wrap(value - self._value(arg))
        return str(value)

    def _multiply(self, args: Sequence[Argument]) -> str:
        product = 1
        for arg in args:
            product = _wrap(product * self._value(arg))
        return str(product)

    def _divide(self, args: Sequence[Argument]) -> str:
        if len(args) >= 2:
            a, b = self._value(args[0]), self._value(args[1])
            return str(_wrap(_trunc_div(a, b)) if b else a)
        return ""

    def _mod(self, args: Sequence[Argument]) -> str:
        if len(args) >= 2:
            a, b = self._value(args[0]), self._value(args[1])
            return str(a - b * _trunc_div(a, b) if b else 0)
        return ""

    def _slash(self, args: Sequence[Argument]) -> str:
        if args:
            return replace_to_slash(self.getarg(*args[0]))
        return ""