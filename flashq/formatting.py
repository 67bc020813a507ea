"""printf-style rendering for flash message templates.

Supported specifiers:

    %s  string            %j      compact JSON
    %d  number            %o, %O  repr()
    %i  integer           %c      consumes an argument, prints nothing
    %f  float             %%      literal percent sign

%i and %f read the leading number of a string ("42px" gives 42). A specifier
with no argument left is kept verbatim; extra arguments are appended,
separated by spaces.
"""
from __future__ import annotations

import json
import math
import re
from typing import Any

_SPECIFIER = re.compile(r"%([sdifjoOc%])")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_string(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _render_number(value)
    return str(value)


def _to_number(value: Any) -> float | int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        for cast in (int, float):
            try:
                return cast(value.strip())
            except ValueError:
                continue
    return math.nan


def _render_number(number: float | int) -> str:
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return str(number)


def _format_integer(value: Any) -> str:
    # Leading integer part only: "42px" renders as 42
    if _is_number(value):
        if isinstance(value, float) and not math.isfinite(value):
            return "NaN"
        return str(int(value))
    match = _INT_PREFIX.match(_to_string(value))
    return str(int(match.group())) if match else "NaN"


def _format_float(value: Any) -> str:
    if _is_number(value):
        number = value
    else:
        match = _FLOAT_PREFIX.match(_to_string(value))
        number = match.group() if match else math.nan
    try:
        return _render_number(float(number))
    except OverflowError:
        return "Infinity" if number > 0 else "-Infinity"


def _format_json(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), default=str)
    except ValueError:
        return "[Circular]"
    except TypeError:
        return repr(value)


_CONVERTERS = {
    "s": _to_string,
    "d": lambda value: _render_number(_to_number(value)),
    "i": _format_integer,
    "f": _format_float,
    "j": _format_json,
    "o": repr,
    "O": repr,
    "c": lambda value: "",
}


def _inspect(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def format_message(template: Any, *args: Any) -> str:
    if not isinstance(template, str):
        return " ".join(_inspect(value) for value in (template, *args))
    if not args:
        return template

    remaining = list(args)

    def _replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        if not remaining:
            return match.group(0)
        return _CONVERTERS[spec](remaining.pop(0))

    text = _SPECIFIER.sub(_replace, template)
    if remaining:
        text = " ".join([text, *(_inspect(value) for value in remaining)])
    return text
