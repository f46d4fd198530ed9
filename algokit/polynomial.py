"""Polynomials kept as terms in descending order of exponent."""

from __future__ import annotations

from collections.abc import Iterable


class Polynomial:
    """A list of ``(coefficient, exponent)`` terms sorted by falling exponent.

    Terms with equal exponents are not merged; a new one goes after
    the ones already present.
    """

    def __init__(self, terms: Iterable[tuple[float, int]] = ()) -> None:
        self._terms: list[tuple[float, int]] = []
        for coeff, expo in terms:
            self.insert(coeff, expo)

    def insert(self, coeff: float, expo: int) -> None:
        """Insert a term, keeping exponents in descending order."""
        position = next(
            (i for i, (_, e) in enumerate(self._terms) if e < expo), len(self._terms)
        )
        self._terms.insert(position, (float(coeff), expo))

    @property
    def terms(self) -> tuple[tuple[float, int], ...]:
        return tuple(self._terms)

    def __call__(self, x: float) -> float:
        """Evaluate the polynomial at ``x``."""
        return sum(coeff * x**expo for coeff, expo in self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"

    def __str__(self) -> str:
        if not self._terms:
            return "empty list"
        return "+".join(f"({coeff:.1f}x^{expo})" for coeff, expo in self._terms)


def add_polynomials(first: Polynomial, second: Polynomial) -> Polynomial:
    """Return the sum of two polynomials by merging their ordered terms."""
    result = Polynomial()
    left = iter(first.terms)
    right = iter(second.terms)
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a[1] == b[1]:
            result.insert(a[0] + b[0], a[1])
            a, b = next(left, None), next(right, None)
        elif a[1] > b[1]:
            result.insert(*a)
            a = next(left, None)
        else:
            result.insert(*b)
            b = next(right, None)
    for term, rest in ((a, left), (b, right)):
        if term is not None:
            result.insert(*term)
        for coeff, expo in rest:
            result.insert(coeff, expo)
    return result