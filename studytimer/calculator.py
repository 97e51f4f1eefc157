"""A scientific calculator with memory, angle modes and a configurable log base."""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from enum import Enum

from .status import StatusMessage

MIN_LOG_BASE = 2.0
MAX_LOG_BASE = 100.0
ERROR_TEXT = "Error"
ERROR_MESSAGE = "Error: Invalid operation"


class AngleMode(Enum):
    """How trigonometric functions read and return angles."""

    DEGREES = "Degrees"
    RADIANS = "Radians"


class Operation(Enum):
    """A pending two-operand operation."""

    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    POWER = "Power"
    ROOT = "Root"
    CUSTOM_LOG = "CustomLog"


def _parse(text: str) -> float | None:
    """Read a number the way the display is read; None when it is not one."""
    if not text.isascii() or text.strip() != text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _format(value: float) -> str:
    """Write a number in plain decimal notation, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _powf(base: float, exponent: float) -> float:
    """Raise to a power, giving NaN or infinity where the result has no finite value."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _ln(value: float) -> float:
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return math.log(value)


def _log10(value: float) -> float:
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return math.log10(value)


def _to_radians(value: float, mode: AngleMode) -> float:
    return value * (math.pi / 180.0) if mode is AngleMode.DEGREES else value


def _from_radians(value: float, mode: AngleMode) -> float:
    return value * 180.0 / math.pi if mode is AngleMode.DEGREES else value


_Function = Callable[[float, AngleMode, float], float]

_FUNCTIONS: dict[str, _Function] = {
    "sin": lambda x, mode, base: math.sin(_to_radians(x, mode)),
    "cos": lambda x, mode, base: math.cos(_to_radians(x, mode)),
    "tan": lambda x, mode, base: math.tan(_to_radians(x, mode)),
    "asin": lambda x, mode, base: _from_radians(math.asin(x), mode),
    "acos": lambda x, mode, base: _from_radians(math.acos(x), mode),
    "atan": lambda x, mode, base: _from_radians(math.atan(x), mode),
    "ln": lambda x, mode, base: _ln(x),
    "log10": lambda x, mode, base: _log10(x),
    "log_base": lambda x, mode, base: _ieee_div(_ln(x), _ln(base)),
    "square": lambda x, mode, base: x * x,
    "sqrt": lambda x, mode, base: math.sqrt(x),
    "reciprocal": lambda x, mode, base: _ieee_div(1.0, x),
    "exp": lambda x, mode, base: math.exp(x),
    "percent": lambda x, mode, base: x / 100.0,
    "base_pow": lambda x, mode, base: _powf(base, x),
}

_CONSTANTS: dict[str, float] = {"pi": math.pi, "π": math.pi, "e": math.e}


def _binary(operation: Operation, left: float, right: float) -> float | None:
    """Apply an operation; None marks an invalid one."""
    if operation is Operation.ADD:
        return left + right
    if operation is Operation.SUBTRACT:
        return left - right
    if operation is Operation.MULTIPLY:
        return left * right
    if operation is Operation.DIVIDE:
        return None if right == 0 else left / right
    if operation is Operation.POWER:
        return _powf(left, right)
    if operation is Operation.ROOT:
        return None if right == 0 else _powf(left, 1.0 / right)
    if left <= 0 or right <= 0 or right == 1:
        return None
    return math.log(left) / math.log(right)


class Calculator:
    """The calculator's display, pending operation, memory and options."""

    def __init__(self, status: StatusMessage | None = None) -> None:
        self.status = status if status is not None else StatusMessage()
        self.display = "0"
        self.operand: float | None = None
        self.operation: Operation | None = None
        self.new_input = True
        self.memory = 0.0
        self.angle_mode = AngleMode.DEGREES
        self.log_base = 10.0

    # Entry

    def input_digit(self, digit: str) -> None:
        """Type a digit, starting a new number when one is due."""
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"not a digit: {digit!r}")
        if self.new_input:
            self.display = digit
            self.new_input = False
        elif self.display == "0":
            self.display = digit
        else:
            self.display += digit

    def input_point(self) -> None:
        """Type a decimal point."""
        if self.new_input:
            self.display = "0."
            self.new_input = False
        elif "." not in self.display:
            self.display += "."

    def choose_operation(self, operation: Operation) -> None:
        """Take the displayed number as the first operand of an operation."""
        value = _parse(self.display)
        if value is not None:
            self.operand = value
            self.operation = operation
            self.new_input = True

    def evaluate(self) -> None:
        """Apply the pending operation to the stored and displayed numbers.

        Without a complete operation the display shows 0. An invalid operation
        shows Error and keeps the pending operation.
        """
        result: float | None = 0.0
        right = _parse(self.display)
        if self.operand is not None and right is not None and self.operation is not None:
            result = _binary(self.operation, self.operand, right)

        if result is None:
            self._show_error()
        else:
            self.display = _format(result)
            self.operand = None
            self.operation = None
        self.new_input = True

    def clear(self) -> None:
        """Reset the display and any pending operation."""
        self.display = "0"
        self.operand = None
        self.operation = None
        self.new_input = True

    def clear_entry(self) -> None:
        """Reset only the displayed number."""
        self.display = "0"
        self.new_input = True

    def backspace(self) -> None:
        """Delete the last character, leaving 0 when nothing would remain."""
        if len(self.display) > 1:
            self.display = self.display[:-1]
        else:
            self.display = "0"
            self.new_input = True

    def toggle_sign(self) -> None:
        """Negate the displayed number."""
        value = _parse(self.display)
        if value is not None:
            self.display = _format(-value)

    # Memory

    def memory_clear(self) -> None:
        """Set memory to zero."""
        self.memory = 0.0
        self.status.show("Memory cleared")

    def memory_recall(self) -> None:
        """Show the remembered number."""
        self.display = _format(self.memory)
        self.new_input = True

    def memory_add(self) -> None:
        """Add the displayed number to memory."""
        value = _parse(self.display)
        if value is not None:
            self.memory += value
            self.status.show(f"Added to memory: {_format(self.memory)}")

    def memory_subtract(self) -> None:
        """Subtract the displayed number from memory."""
        value = _parse(self.display)
        if value is not None:
            self.memory -= value
            self.status.show(f"Subtracted from memory: {_format(self.memory)}")

    # Functions

    def apply_function(self, name: str) -> None:
        """Replace the displayed number with a function of it.

        Names: sin, cos, tan, asin, acos, atan, ln, log10, log_base, square,
        sqrt, reciprocal, exp, percent, base_pow. A result that is not a
        finite number shows Error.
        """
        try:
            function = _FUNCTIONS[name]
        except KeyError:
            raise ValueError(f"unknown function {name!r}") from None

        value = _parse(self.display)
        result: float | None = None
        if value is not None:
            try:
                result = function(value, self.angle_mode, self.log_base)
            except (ValueError, OverflowError, ZeroDivisionError):
                result = None
            if result is not None and not math.isfinite(result):
                result = None

        if result is None:
            self._show_error()
        else:
            self.display = _format(result)
        self.new_input = True

    def set_log_base(self, base: float) -> None:
        """Set the base of logₙ, kept between 2 and 100."""
        self.log_base = min(max(float(base), MIN_LOG_BASE), MAX_LOG_BASE)
        self.status.show(f"Log base set to {_format(self.log_base)}")

    def log_base_from_display(self) -> None:
        """Use the displayed number as the base of logₙ."""
        value = _parse(self.display)
        if value is not None:
            self.log_base = value
            self.status.show(f"Log base set to {_format(value)}")
            self.new_input = True

    def insert_constant(self, name: str) -> None:
        """Show pi or e."""
        try:
            value = _CONSTANTS[name]
        except KeyError:
            raise ValueError(f"unknown constant {name!r}") from None
        self.display = repr(value)
        self.new_input = True

    # Buttons

    def press(self, label: str) -> None:
        """Act as the button with the given label."""
        try:
            action = _BUTTONS[label]
        except KeyError:
            raise ValueError(f"no button labelled {label!r}") from None
        action(self)

    def _show_error(self) -> None:
        self.status.show(ERROR_MESSAGE)
        self.display = ERROR_TEXT


def _digit(digit: str) -> Callable[[Calculator], None]:
    return lambda calc: calc.input_digit(digit)


def _operation(operation: Operation) -> Callable[[Calculator], None]:
    return lambda calc: calc.choose_operation(operation)


def _function(name: str) -> Callable[[Calculator], None]:
    return lambda calc: calc.apply_function(name)


def _constant(name: str) -> Callable[[Calculator], None]:
    return lambda calc: calc.insert_constant(name)


_BUTTONS: dict[str, Callable[[Calculator], None]] = {
    **{digit: _digit(digit) for digit in "0123456789"},
    ".": Calculator.input_point,
    "=": Calculator.evaluate,
    "+": _operation(Operation.ADD),
    "-": _operation(Operation.SUBTRACT),
    "×": _operation(Operation.MULTIPLY),
    "÷": _operation(Operation.DIVIDE),
    "xʸ": _operation(Operation.POWER),
    "ʸ√x": _operation(Operation.ROOT),
    "mod": _operation(Operation.CUSTOM_LOG),
    "C": Calculator.clear,
    "CE": Calculator.clear_entry,
    "⌫": Calculator.backspace,
    "±": Calculator.toggle_sign,
    "MC": Calculator.memory_clear,
    "MR": Calculator.memory_recall,
    "M+": Calculator.memory_add,
    "M-": Calculator.memory_subtract,
    "sin": _function("sin"),
    "cos": _function("cos"),
    "tan": _function("tan"),
    "ln": _function("ln"),
    "asin": _function("asin"),
    "acos": _function("acos"),
    "atan": _function("atan"),
    "log₁₀": _function("log10"),
    "x²": _function("square"),
    "√x": _function("sqrt"),
    "1/x": _function("reciprocal"),
    "eˣ": _function("exp"),
    "%": _function("percent"),
    "base^x": _function("base_pow"),
    "logₙ(x)": _function("log_base"),
    "logₙ(base)": Calculator.log_base_from_display,
    "π": _constant("pi"),
    "e": _constant("e"),
}