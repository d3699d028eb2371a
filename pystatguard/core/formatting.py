"""
Diagnostic message formatting.

Messages are built as templates with a single `%1%` placeholder standing for
the offending value. The template is only rendered once a violation has been
detected, so the success path of a check never builds a string.

    >>> format_message("sigma is %1%, but must be finite!", float('inf'))
    'sigma is inf, but must be finite!'
    >>> qualify("y", 2)
    'y[2]'
"""

import math
import numbers
from typing import Any

import numpy as np

PLACEHOLDER = "%1%"

# Ints wider than this are rendered in scientific notation; str() of very
# large ints is quadratic and capped by sys.set_int_max_str_digits.
_MAX_PLAIN_INT_BITS = 3000


def is_integer_value(value: Any) -> bool:
    """True for Python ints/bools and numpy integer/bool scalars."""
    return isinstance(value, (numbers.Integral, np.bool_))


def format_value(value: Any) -> str:
    """
    Render an offending value for a diagnostic.

    Floats use the shortest round-trip representation (`nan`, `inf`,
    `-inf` for the non-finite cases); integers are rendered plainly, or
    in scientific notation once they exceed about 900 digits.
    Anything else falls back to str().
    """
    if is_integer_value(value):
        return _format_int(int(value))
    if isinstance(value, np.floating):
        return str(value)
    if isinstance(value, numbers.Real):
        return repr(float(value))
    return str(value)


def _format_int(value: int) -> str:
    if value.bit_length() <= _MAX_PLAIN_INT_BITS:
        return str(value)
    sign = '-' if value < 0 else ''
    value = abs(value)
    shift = int(math.log10(value)) - 6
    digits = str(value // 10 ** shift)
    exponent = shift + len(digits) - 1
    return f"{sign}{digits[0]}.{digits[1:7]}e+{exponent}"


def format_message(template: str, value: Any) -> str:
    """Substitute every placeholder in template with the formatted value."""
    return template.replace(PLACEHOLDER, format_value(value))


def format_function(function: str, value: Any) -> str:
    """
    Substitute the placeholder in a function name with the value's type.

    Function names may be written generically, e.g. "normal_log<%1%>",
    and are specialised with the numeric type actually being checked.
    """
    if PLACEHOLDER not in function:
        return function
    return function.replace(PLACEHOLDER, type_name(value))


def type_name(value: Any) -> str:
    """Name of the numeric type of value, as numpy reports it."""
    if isinstance(value, np.generic):
        return value.dtype.name
    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, numbers.Integral):
        return 'int'
    if isinstance(value, numbers.Real):
        return 'float64'
    return type(value).__name__


def qualify(name: str, index: int) -> str:
    """Index-qualified parameter name for aggregate diagnostics."""
    return f"{name}[{index}]"


def full_message(function: str, message: str, value: Any) -> str:
    """
    Complete diagnostic text handed to the user.

    Format: "Error in function <function>: <message>" with both parts
    rendered against the offending value.
    """
    return (
        f"Error in function {format_function(function, value)}: "
        f"{format_message(message, value)}"
    )


def format_matrix(matrix: Any) -> str:
    """Multi-line dump of a matrix for covariance diagnostics."""
    return np.array2string(np.asarray(matrix), max_line_width=120)
