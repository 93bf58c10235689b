"""Everyday integer arithmetic: a four-function calculator and small number drills."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import IntEnum


class Operation(IntEnum):
    """Calculator operations, numbered as on the calculator menu."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4

    @property
    def symbol(self) -> str:
        return {
            Operation.ADD: "+",
            Operation.SUBTRACT: "-",
            Operation.MULTIPLY: "x",
            Operation.DIVIDE: "/",
        }[self]


def calculate(operation: Operation | int, num1: int, num2: int) -> int | float:
    """Apply ``operation`` to two integers.

    Addition, subtraction and multiplication give integers; division gives a
    float without truncation. Raises ValueError for an unknown operation and
    ZeroDivisionError when dividing by zero.
    """
    try:
        op = Operation(operation)
    except ValueError:
        raise ValueError(f"Incorrect option: {operation!r}") from None

    if op is Operation.ADD:
        return num1 + num2
    if op is Operation.SUBTRACT:
        return num1 - num2
    if op is Operation.MULTIPLY:
        return num1 * num2
    if num2 == 0:
        raise ZeroDivisionError("Division by zero is not allowed.")
    return num1 / num2


def square(number: int) -> int:
    """Return ``number`` squared."""
    return number**2


def cube(number: int) -> int:
    """Return ``number`` cubed."""
    return number**3


def is_perfect_square(num: int) -> bool:
    """Return True if ``num`` is the square of an integer."""
    if num < 0:
        return False
    root = math.isqrt(num)
    return root * root == num


def class_average(grades: Iterable[float]) -> float:
    """Return the mean of grades, each of which must lie in 0..100."""
    values = list(grades)
    if not values:
        raise ValueError("at least one grade is required")
    for grade in values:
        if not 0 <= grade <= 100:
            raise ValueError(f"grade out of range 0-100: {grade!r}")
    return sum(values) / len(values)


def _check_factorial_argument(number: int) -> None:
    if number < 0:
        raise ValueError(f"factorial is not defined for negative numbers: {number}")


def factorial_iterative(number: int) -> int:
    """Return ``number!`` computed with a loop."""
    _check_factorial_argument(number)
    result = 1
    for factor in range(2, number + 1):
        result *= factor
    return result


def factorial_recursive(number: int) -> int:
    """Return ``number!`` computed recursively."""
    _check_factorial_argument(number)
    if number <= 1:
        return 1
    return number * factorial_recursive(number - 1)


def fibonacci_iterative(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    series: list[int] = []
    previous, current = 0, 1
    for _ in range(max(count, 0)):
        series.append(previous)
        previous, current = current, previous + current
    return series


def fibonacci_recursive(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, built recursively."""
    if count <= 0:
        return []
    if count == 1:
        return [0]
    if count == 2:
        return [0, 1]
    series = fibonacci_recursive(count - 1)
    series.append(series[-1] + series[-2])
    return series


def largest_of_three(num1: int, num2: int, num3: int) -> tuple[int, int]:
    """Return ``(position, value)`` of the largest number; position is 1-based.

    On a tie the earliest position wins.
    """
    value = max(num1, num2, num3)
    position = (num1, num2, num3).index(value) + 1
    return position, value


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_even(num: int) -> bool:
    """Return True if ``num`` is even."""
    return num % 2 == 0


def sum_natural(count: int) -> int:
    """Return 1 + 2 + ... + count, or 0 when count is below 1."""
    return sum(range(1, count + 1))


def swap_arithmetic(num1: int, num2: int) -> tuple[int, int]:
    """Swap two integers using only addition and subtraction."""
    num1 = num1 + num2
    num2 = num1 - num2
    num1 = num1 - num2
    return num1, num2


def swap_temp(num1: int, num2: int) -> tuple[int, int]:
    """Swap two values through a temporary."""
    temp = num1
    num1 = num2
    num2 = temp
    return num1, num2


def multiplication_table(number: int) -> list[str]:
    """Return the lines of the 1..10 table of ``number``; empty if not positive."""
    if number <= 0:
        return []
    return [f"{number} * {factor} = {number * factor}" for factor in range(1, 11)]