"""Four-function calculator driven by key presses.

The calculator keeps two pieces of state: the display and an expression
buffer. Digits extend the current operand in both. An operator closes the
operand; pressing another operator straight away replaces it. ``=``
evaluates the buffer with normal precedence (see ``expression``) and the
result becomes the new operand, so typing more digits extends it.
"""

import math
from enum import Enum
from typing import Optional

from bizdash.collaborators import Clipboard, Notifier, NullNotifier
from bizdash.domain.errors import ComputationError
from bizdash.domain.expression import OPERATORS, evaluate
from bizdash.logging_config import get_logger

logger = get_logger(__name__)

ERROR_DISPLAY = "Error"
MAX_DISPLAY_LENGTH = 16
SIGNIFICANT_DIGITS = 10
DIGIT_KEYS = frozenset("0123456789.")


class CalculatorState(str, Enum):
    IDLE = "idle"
    ENTERING = "entering"
    OPERATOR_PENDING = "operator_pending"
    ERROR = "error"


def format_result(value: float) -> str:
    """Round to 10 significant digits and drop a trailing ``.0``."""
    rounded = float(f"{value:.{SIGNIFICANT_DIGITS}g}")
    if rounded == 0:
        return "0"
    if rounded.is_integer() and abs(rounded) < 1e16:
        return str(int(rounded))
    return repr(rounded)


class Calculator:
    """State machine over digit, operator, ``=``, ``%`` and clear inputs."""

    def __init__(
        self,
        clipboard: Optional[Clipboard] = None,
        notifier: Optional[Notifier] = None,
        max_length: int = MAX_DISPLAY_LENGTH,
    ):
        self.clipboard = clipboard
        self.notifier = notifier or NullNotifier()
        self.max_length = max_length
        self.clear()

    def clear(self) -> None:
        """Reset display and expression buffer."""
        self.display = "0"
        self.expression = ""
        self._operand = ""
        self.state = CalculatorState.IDLE

    def press(self, key: str) -> str:
        """Dispatch a single key and return the new display.

        Keys: ``0``-``9``, ``.``, ``+ - * /``, ``=``, ``%``, ``C`` (clear).

        Raises:
            ValueError: For an unknown key
        """
        if key in DIGIT_KEYS:
            self.input_digit(key)
        elif key in OPERATORS:
            self.input_operator(key)
        elif key == "=":
            self.equals()
        elif key == "%":
            self.percent()
        elif key.upper() == "C":
            self.clear()
        else:
            raise ValueError(f"Unknown calculator key '{key}'")
        return self.display

    def press_all(self, keys) -> str:
        """Press each key in turn and return the final display."""
        for key in keys:
            self.press(key)
        return self.display

    def input_digit(self, digit: str) -> None:
        """Append a digit or decimal point to the current operand."""
        if self.state == CalculatorState.ERROR:
            self.clear()
        if self.state == CalculatorState.OPERATOR_PENDING:
            self._operand = ""

        if digit == "." and "." in self._operand:
            return
        if self._operand in ("", "0") and digit != ".":
            operand = digit
        elif self._operand == "" and digit == ".":
            operand = "0."
        else:
            operand = self._operand + digit
        if len(operand) > self.max_length:
            return

        self._replace_operand(operand)
        self.state = CalculatorState.ENTERING

    def input_operator(self, operator: str) -> None:
        """Close the current operand with an operator.

        A second operator in a row replaces the first. Ignored in the error
        state; before anything has been entered only a leading minus is taken.
        """
        if self.state == CalculatorState.ERROR:
            return
        if not self.expression:
            if operator != "-":
                return
            self.expression = operator
        elif self.expression[-1] in OPERATORS:
            self.expression = self.expression[:-1] + operator
        else:
            self.expression += operator
        self.display = operator
        self.state = CalculatorState.OPERATOR_PENDING

    def percent(self) -> None:
        """Divide the current operand by 100 in place."""
        if self.state not in (CalculatorState.ENTERING, CalculatorState.IDLE) or not self._operand:
            return
        self._replace_operand(format_result(float(self._operand) / 100))

    def equals(self) -> None:
        """Evaluate the expression buffer.

        A non-finite or unparseable result moves to the error state and
        empties the buffer. Pressing ``=`` with an empty buffer does nothing.
        """
        if self.state == CalculatorState.ERROR or not self.expression:
            return
        try:
            result = evaluate(self.expression)
            if math.isnan(result) or math.isinf(result):
                raise ComputationError(f"'{self.expression}' is not a finite number")
        except ComputationError as exc:
            logger.info("Calculation failed: %s", exc)
            self.display = ERROR_DISPLAY
            self.expression = ""
            self._operand = ""
            self.state = CalculatorState.ERROR
            return

        self._operand = ""
        self.expression = ""
        self._replace_operand(format_result(result))
        self.state = CalculatorState.IDLE

    def copy_result(self) -> bool:
        """Hand the display to the clipboard if it shows a non-zero number.

        Returns:
            True if something was copied
        """
        if self.clipboard is None or not self._copyable():
            return False
        self.clipboard.copy(self.display)
        self.notifier.notify("Result copied", f"The value {self.display} was copied to the clipboard.")
        return True

    def _copyable(self) -> bool:
        if self.state in (CalculatorState.ERROR, CalculatorState.OPERATOR_PENDING):
            return False
        try:
            value = float(self.display)
        except ValueError:
            return False
        return math.isfinite(value) and value != 0

    def _replace_operand(self, operand: str) -> None:
        # The buffer always ends with the current operand while one is open.
        prefix = self.expression[: len(self.expression) - len(self._operand)]
        self.expression = prefix + operand
        self._operand = operand
        self.display = operand
