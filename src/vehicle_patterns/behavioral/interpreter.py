"""Interpreter pattern - a tiny driving-instruction language.

Intent:
    Given a language, define a representation for its grammar along with an
    interpreter that uses the representation to interpret sentences in the
    language.

Grammar::

    program := command ("then" command)*
    command := "accelerate" NUMBER
             | "brake" NUMBER
             | "cruise"
             | "stop"

Every grammar rule is a class with ``interpret(context)``. ``parse()`` turns
text such as ``"accelerate 50 then cruise then brake 20"`` into a tree of
those classes; interpreting the tree drives a ``DrivingContext``.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from vehicle_patterns.cli.example import run_example
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger

logger = get_logger(__name__)

KEYWORDS_WITH_AMOUNT = ("accelerate", "brake")
KEYWORDS_WITHOUT_AMOUNT = ("cruise", "stop")
SEPARATOR = "then"


class DrivingContext:
    """Interpretation context: the car's speed and a trace of what happened."""

    def __init__(self, speed: int = 0, max_speed: int = 130):
        if max_speed < 0:
            raise ValidationError(f"max_speed must not be negative, got {max_speed}")
        if not 0 <= speed <= max_speed:
            raise ValidationError(f"Starting speed {speed} is outside 0..{max_speed}")
        self.speed = speed
        self.max_speed = max_speed
        self.log: List[str] = []

    def record(self, message: str) -> None:
        self.log.append(f"{message} -> {self.speed} km/h")


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: DrivingContext) -> None:
        pass


class Accelerate(Expression):
    def __init__(self, amount: int):
        self.amount = amount

    def interpret(self, context: DrivingContext) -> None:
        context.speed = min(context.max_speed, context.speed + self.amount)
        context.record(f"accelerate {self.amount}")


class Brake(Expression):
    def __init__(self, amount: int):
        self.amount = amount

    def interpret(self, context: DrivingContext) -> None:
        context.speed = max(0, context.speed - self.amount)
        context.record(f"brake {self.amount}")


class Cruise(Expression):
    def interpret(self, context: DrivingContext) -> None:
        context.record("cruise")


class Stop(Expression):
    def interpret(self, context: DrivingContext) -> None:
        context.speed = 0
        context.record("stop")


class Sequence(Expression):
    """Non-terminal: runs its expressions in order."""

    def __init__(self, expressions: List[Expression]):
        self.expressions = expressions

    def interpret(self, context: DrivingContext) -> None:
        for expression in self.expressions:
            expression.interpret(context)


def _parse_command(words: List[str]) -> Expression:
    keyword = words[0]
    if keyword in KEYWORDS_WITHOUT_AMOUNT:
        if len(words) != 1:
            raise ValidationError(f"'{keyword}' takes no argument: {' '.join(words)}")
        return Cruise() if keyword == "cruise" else Stop()

    if keyword in KEYWORDS_WITH_AMOUNT:
        if len(words) != 2:
            raise ValidationError(f"'{keyword}' needs exactly one number: {' '.join(words)}")
        try:
            amount = int(words[1])
        except ValueError as e:
            raise ValidationError(f"'{words[1]}' is not a whole number") from e
        if amount < 0:
            raise ValidationError(f"Amount must not be negative: {amount}")
        return Accelerate(amount) if keyword == "accelerate" else Brake(amount)

    raise ValidationError(f"Unknown instruction: '{keyword}'")


def parse(text: str) -> Sequence:
    """
    Parse a program into an expression tree.

    Raises:
        ValidationError: On empty programs, unknown words or bad numbers
    """
    tokens = text.lower().split()
    if not tokens:
        raise ValidationError("Program is empty")

    commands: List[List[str]] = [[]]
    for token in tokens:
        if token == SEPARATOR:
            commands.append([])
        else:
            commands[-1].append(token)

    if any(not command for command in commands):
        raise ValidationError(f"Dangling '{SEPARATOR}' in program: {text}")

    logger.debug("Parsed program", commands=len(commands))
    return Sequence([_parse_command(command) for command in commands])


def run(text: str, context: Optional[DrivingContext] = None) -> DrivingContext:
    context = context or DrivingContext()
    parse(text).interpret(context)
    return context


def demo() -> List[str]:
    program = "accelerate 50 then accelerate 100 then cruise then brake 30 then stop"
    context = run(program)
    lines = [f"Program: {program}", *context.log]
    try:
        parse("accelerate fast")
    except ValidationError as e:
        lines.append(f"Rejected 'accelerate fast': {e}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    return run_example(demo, "Interpreter pattern", argv)


if __name__ == "__main__":
    raise SystemExit(main())
