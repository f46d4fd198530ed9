"""Classic number puzzles: digit properties, sequences and simple searches."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import factorial as _factorial


def _digits(number: int) -> Iterator[int]:
    """Yield the decimal digits of a non-negative number, least significant first.

    Zero has no digits, matching a loop that runs while the value is non-zero.
    """
    while number:
        number, digit = divmod(number, 10)
        yield digit


def _signed_digits(number: int) -> list[int]:
    """Digits carrying the sign of ``number`` (as truncating division yields them)."""
    sign = -1 if number < 0 else 1
    return [sign * d for d in _digits(abs(number))]


def is_armstrong(number: int) -> bool:
    """Return True if ``number`` equals the sum of its digits raised to the digit count."""
    digits = _signed_digits(number)
    count = len(digits)
    return sum(d**count for d in digits) == number


def factorial(number: int) -> int:
    """Return ``number!`` for a non-negative integer."""
    if number < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for value in range(number, 0, -1):
        result *= value
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting from 0."""
    terms = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return terms


def floyds_triangle(rows: int) -> list[list[int]]:
    """Return Floyd's triangle with ``rows`` rows of consecutive integers from 1."""
    triangle = []
    start = 1
    for length in range(1, rows + 1):
        triangle.append(list(range(start, start + length)))
        start += length
    return triangle


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def reverse_number(number: int) -> int:
    """Reverse the decimal digits of ``number``, keeping its sign."""
    result = 0
    for digit in _signed_digits(number):
        result = result * 10 + digit
    return result


def is_palindrome(number: int) -> bool:
    """Return True if ``number`` reads the same with its digits reversed."""
    return reverse_number(number) == number


def is_perfect(number: int) -> bool:
    """Return True if ``number`` equals the sum of its divisors below itself."""
    return sum(i for i in range(1, number) if number % i == 0) == number


def is_prime(number: int) -> bool:
    """Return True if no integer from 2 up to half of ``number`` divides it.

    As with that trial-division rule, values whose half is below 2
    (including 0 and 1) are reported as prime.
    """
    half = abs(number) // 2
    if number < 0:
        half = -half
    return all(number % i != 0 for i in range(2, half + 1))


def strong_sum(number: int) -> int:
    """Return the sum of the factorials of the digits of ``number``."""
    if number < 0:
        raise ValueError("strong numbers are defined for non-negative values only")
    return sum(_factorial(d) for d in _digits(number))


def is_strong(number: int) -> bool:
    """Return True if ``number`` equals the sum of the factorials of its digits."""
    return strong_sum(number) == number


def celsius_to_fahrenheit(value: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (value - 32) * 5 / 9


def convert_temperature(scale: str, value: float) -> float:
    """Convert ``value`` given in ``scale`` ('C' or 'F') to the other scale."""
    if scale == "C":
        return celsius_to_fahrenheit(value)
    if scale == "F":
        return fahrenheit_to_celsius(value)
    raise ValueError(f"unknown temperature scale {scale!r}: use 'C' or 'F'")


def max_min(values: Sequence[int]) -> tuple[int, int]:
    """Return the largest and smallest of ``values``."""
    if not values:
        raise ValueError("max_min() needs at least one value")
    ordered = sorted(values, reverse=True)
    return ordered[0], ordered[-1]


def binary_search(values: Sequence[int], target: int) -> bool:
    """Return True if ``target`` is in the ascending sequence ``values``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False