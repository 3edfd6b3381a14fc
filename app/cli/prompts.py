import re
from typing import Callable, Optional, Sequence
from app.config import settings
from app.models.student import MIN_AGE, MAX_AGE


Validator = Callable[[str], Optional[str]]

BOLD = "\033[1m"
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> Optional[int]:
    """Parse an optionally signed run of ASCII digits; anything else is None."""
    value = value.strip()
    if not INTEGER.fullmatch(value):
        return None
    return int(value)


def validate_age(value: str) -> Optional[str]:
    """Return an error message unless value is an integer age in range."""
    age = parse_int(value)
    if age is None or age < MIN_AGE or age > MAX_AGE:
        return f"Please enter a valid age between {MIN_AGE} and {MAX_AGE}."
    return None


def validate_index(value: str, length: int) -> Optional[str]:
    """Return an error message unless value is a 1-based position in [1, length]."""
    index = parse_int(value)
    if index is None or index < 1 or index > length:
        return "Please enter a valid index."
    return None


class Prompter:
    """Console prompts over pluggable input/output callables."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        use_color: Optional[bool] = None
    ):
        self._input = input_func
        self._output = output_func
        self.use_color = settings.use_color if use_color is None else use_color

    # ---------- output ----------
    def say(self, text: str = "") -> None:
        self._output(text)

    def _styled(self, text: str, *codes: str) -> str:
        if not self.use_color:
            return text
        return "".join(codes) + text + RESET

    def banner(self, text: str) -> None:
        self._output(self._styled(text, BOLD))

    def success(self, text: str) -> None:
        self._output(self._styled(text, GREEN, BOLD))

    def error(self, text: str) -> None:
        self._output(self._styled(text, RED, BOLD))

    # ---------- input ----------
    def text(self, message: str, default: Optional[str] = None) -> str:
        suffix = f" ({default})" if default is not None else ""
        answer = self._input(f"{message}{suffix} ")
        if not answer.strip() and default is not None:
            return default
        return answer

    def validated(
        self,
        message: str,
        validate: Validator,
        default: Optional[str] = None
    ) -> str:
        """Ask until validate() accepts the answer."""
        while True:
            answer = self.text(message, default)
            problem = validate(answer)
            if problem is None:
                return answer
            self.error(problem)

    def choice(
        self,
        message: str,
        choices: Sequence[str],
        default: Optional[str] = None
    ) -> str:
        """Ask for one of choices, by number or by label."""
        self._output(message)
        for number, option in enumerate(choices, start=1):
            marker = " (default)" if option == default else ""
            self._output(f"  {number}) {option}{marker}")

        while True:
            answer = self.text("Select an option:", default).strip()
            if answer in choices:
                return answer
            number = parse_int(answer)
            if number is not None and 1 <= number <= len(choices):
                return choices[number - 1]
            self.error(f"Please choose a number between 1 and {len(choices)}.")
