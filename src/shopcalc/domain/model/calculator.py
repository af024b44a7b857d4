"""Calculator: a button-token driven state machine.

The calculator is either showing an entry (``Entry``) or showing an entry
while holding a captured first operand and operator
(``PendingOperation``). Keeping the two as separate states means an
operator can never be pending without its operand.

``fresh`` marks that the next digit starts a new number instead of being
appended to the one on display.

All arithmetic is done on binary floats. Anything that cannot be shown as
a finite number ends up as the ``"Error"`` sentinel on the display; no
exception ever leaves ``press()``.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Union

logger = logging.getLogger(__name__)

ERROR = "Error"
MAX_DISPLAY_LENGTH = 12
HISTORY_SIZE = 20

DIGITS = frozenset("0123456789")
DECIMAL_POINT = "."
EQUALS = "="
CLEAR = "C"
BACKSPACE = "⌫"
SIGN_TOGGLE = "±"
PERCENT = "%"

# ASCII spellings accepted for keys that are awkward to type.
ALIASES = {
    "−": "-",
    "*": "×",
    "x": "×",
    "/": "÷",
    "**": "^",
    "sqrt": "√",
    "log10": "log",
    "sq": "x²",
    "x^2": "x²",
    "inv": "1/x",
    "pi": "π",
    "+/-": "±",
    "neg": "±",
    "bs": "⌫",
    "back": "⌫",
    "c": "C",
    "deg": "DEG",
    "rad": "RAD",
}


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "^"

    def apply(self, a: float, b: float) -> float:
        """Binary result; impossible results come back as NaN or infinity."""
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        if self is Operator.DIVIDE:
            if b == 0.0:
                return math.nan
            return a / b
        try:
            return math.pow(a, b)
        except OverflowError:
            return math.inf
        except ValueError:
            return math.nan


class AngleMode(Enum):
    DEG = "DEG"
    RAD = "RAD"


# --- States -------------------------------------------------------------------


@dataclass(frozen=True)
class Entry:
    display: str = "0"
    fresh: bool = False


@dataclass(frozen=True)
class PendingOperation:
    display: str
    operand: float
    operator: Operator
    fresh: bool = True


CalculatorState = Union[Entry, PendingOperation]


# --- Formatting -----------------------------------------------------------------


def format_result(value: float) -> str:
    """Render a computed value for the 12-character display."""
    if math.isnan(value) or math.isinf(value):
        return ERROR
    if value % 1.0 == 0.0 and abs(value) < 1e10:
        return str(int(value))
    if abs(value) < 1e-4:
        return f"{value:.2e}"
    formatted = f"{value:.8f}".rstrip("0").rstrip(".")
    if len(formatted) > MAX_DISPLAY_LENGTH:
        return f"{value:.2e}"
    return formatted


def parse_display(display: str) -> float | None:
    """The display as a finite float, or None if it is not a number."""
    try:
        value = float(display)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _guarded(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Map math domain errors to NaN/infinity like IEEE arithmetic would."""

    def wrapper(x: float) -> float:
        try:
            return fn(x)
        except ZeroDivisionError:
            return math.inf
        except OverflowError:
            return math.inf
        except ValueError:
            return math.nan

    return wrapper


class Calculator:
    """Standard and scientific calculator driven by key tokens.

    >>> calc = Calculator()
    >>> calc.press_all(["2", "+", "3", "="])
    '5'
    >>> calc.history
    ['2 + 3 = 5']
    """

    def __init__(self, angle_mode: AngleMode = AngleMode.DEG) -> None:
        self.angle_mode = angle_mode
        self._state: CalculatorState = Entry()
        self._history: deque[str] = deque(maxlen=HISTORY_SIZE)
        self._unary: dict[str, Callable[[float], float]] = {
            "sin": _guarded(lambda x: math.sin(self._to_radians(x))),
            "cos": _guarded(lambda x: math.cos(self._to_radians(x))),
            "tan": _guarded(lambda x: math.tan(self._to_radians(x))),
            "√": _guarded(math.sqrt),
            "ln": _guarded(math.log),
            "log": _guarded(math.log10),
            "x²": _guarded(lambda x: x * x),
            "1/x": _guarded(lambda x: 1 / x),
        }
        self._constants = {"π": repr(math.pi), "e": repr(math.e)}

    # --- Read-only view -------------------------------------------------------

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    @property
    def history(self) -> list[str]:
        """Completed calculations, newest first."""
        return list(self._history)

    @property
    def pending_operand(self) -> float | None:
        if isinstance(self._state, PendingOperation):
            return self._state.operand
        return None

    @property
    def pending_operator(self) -> Operator | None:
        if isinstance(self._state, PendingOperation):
            return self._state.operator
        return None

    # --- Input ----------------------------------------------------------------

    def press(self, token: str) -> str:
        """Feed one key token and return the new display."""
        token = ALIASES.get(token, token)
        try:
            self._dispatch(token)
        except (ArithmeticError, ValueError):
            logger.debug("Calculator failed on token %r", token, exc_info=True)
            self._state = replace(self._state, display=ERROR)
        return self.display

    def press_all(self, tokens) -> str:
        for token in tokens:
            self.press(token)
        return self.display

    # --- Transitions ----------------------------------------------------------

    def _dispatch(self, token: str) -> None:
        if token in DIGITS or token == DECIMAL_POINT:
            self._enter(token)
        elif token == CLEAR:
            self._state = Entry()
        elif token == BACKSPACE:
            self._backspace()
        elif token == EQUALS:
            self._equals()
        elif token == SIGN_TOGGLE:
            self._transform(lambda x: -x)
        elif token == PERCENT:
            self._transform(lambda x: x / 100)
        elif token in self._unary:
            self._transform(self._unary[token])
        elif token in self._constants:
            self._state = replace(self._state, display=self._constants[token])
        elif token in AngleMode.__members__:
            self.angle_mode = AngleMode[token]
        else:
            operator = _operator_for(token)
            if operator is not None:
                self._capture(operator)
            else:
                logger.debug("Ignoring unknown calculator token %r", token)

    def _enter(self, token: str) -> None:
        display = self._state.display
        if token == DECIMAL_POINT and DECIMAL_POINT in display and not self._state.fresh:
            return
        if self._state.fresh or display in ("0", ERROR):
            new_display = "0." if token == DECIMAL_POINT else token
            self._state = replace(self._state, display=new_display, fresh=False)
        elif len(display) < MAX_DISPLAY_LENGTH:
            self._state = replace(self._state, display=display + token)

    def _capture(self, operator: Operator) -> None:
        display = self._state.display
        operand = parse_display(display)
        if operand is None:
            self._state = Entry(display=display, fresh=True)
        else:
            self._state = PendingOperation(
                display=display, operand=operand, operator=operator, fresh=True
            )

    def _equals(self) -> None:
        state = self._state
        if not isinstance(state, PendingOperation):
            return
        second = parse_display(state.display)
        if second is None:
            return

        result = state.operator.apply(state.operand, second)
        formatted = format_result(result)
        if formatted != ERROR:
            self._history.appendleft(
                f"{format_result(state.operand)} {state.operator.value} "
                f"{format_result(second)} = {formatted}"
            )
        self._state = Entry(display=formatted, fresh=state.fresh)

    def _backspace(self) -> None:
        display = self._state.display
        if display == ERROR or len(display) <= 1:
            self._state = replace(self._state, display="0")
        else:
            self._state = replace(self._state, display=display[:-1])

    def _transform(self, fn: Callable[[float], float]) -> None:
        value = parse_display(self._state.display)
        if value is None:
            return
        self._state = replace(self._state, display=format_result(fn(value)))

    def _to_radians(self, x: float) -> float:
        if self.angle_mode is AngleMode.RAD:
            return x
        return math.radians(x)


def _operator_for(token: str) -> Operator | None:
    try:
        return Operator(token)
    except ValueError:
        return None
