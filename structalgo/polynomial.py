"""Sparse integer polynomials and a merge of sorted integer sequences."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Monomial:
    """A single term ``coef * x^degree``."""

    coef: int
    degree: int

    def __str__(self) -> str:
        if self.coef == 0:
            return ""
        if self.degree == 0:
            return str(self.coef)
        prefix = "" if self.coef == 1 else str(self.coef)
        suffix = "x" if self.degree == 1 else f"x^{self.degree}"
        return prefix + suffix


@dataclass(frozen=True)
class Polynomial:
    """A sequence of monomials, normally kept in increasing degree order."""

    terms: tuple[Monomial, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "terms",
            tuple(
                term if isinstance(term, Monomial) else Monomial(*term)
                for term in self.terms
            ),
        )

    def prepend(self, coef: int, degree: int) -> Polynomial:
        """A new polynomial with ``coef * x^degree`` placed in front."""
        return Polynomial((Monomial(coef, degree),) + self.terms)

    def degree(self) -> int:
        """Highest degree among the terms, 0 for the empty polynomial."""
        return max((term.degree for term in self.terms if term.degree > 0), default=0)

    def multiply_monomial(self, coef: int, degree: int) -> Polynomial:
        """Every term multiplied by ``coef * x^degree``."""
        return Polynomial(
            tuple(Monomial(coef * term.coef, degree + term.degree) for term in self.terms)
        )

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        left = deque(self.terms)
        right = deque(other.terms)
        result: list[Monomial] = []
        while left and right:
            first, second = left[0], right[0]
            if first.degree == second.degree:
                left.popleft()
                right.popleft()
                total = first.coef + second.coef
                if total != 0:
                    result.append(Monomial(total, first.degree))
            elif first.degree < second.degree:
                result.append(left.popleft())
            else:
                result.append(right.popleft())
        result.extend(left)
        result.extend(right)
        return Polynomial(tuple(result))

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        product = Polynomial()
        for term in reversed(self.terms):
            product = other.multiply_monomial(term.coef, term.degree) + product
        return product

    def __iter__(self) -> Iterator[Monomial]:
        return iter(self.terms)

    def __str__(self) -> str:
        parts: list[str] = []
        followers = self.terms[1:] + (None,)
        for term, following in zip(self.terms, followers):
            parts.append(str(term))
            if following is not None and following.coef > 0:
                parts.append(" + ")
        return "".join(parts)


def symmetric_difference(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences, dropping values found at the head of both."""
    left = deque(first)
    right = deque(second)
    result: list[int] = []
    while left and right:
        if left[0] == right[0]:
            left.popleft()
            right.popleft()
        elif left[0] < right[0]:
            result.append(left.popleft())
        else:
            result.append(right.popleft())
    result.extend(left)
    result.extend(right)
    return result