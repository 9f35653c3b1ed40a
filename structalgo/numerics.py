"""Factorials, Fibonacci numbers, determinants and barrel volumes."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence, TextIO

NMAX = 10
PI = 3.14159

Matrix = Sequence[Sequence[float]]


@dataclass
class Barrel:
    """A barrel described by its two diameters, its length and its contents."""

    small_diameter: float
    large_diameter: float
    length: float
    contents: str = ""

    def volume(self) -> float:
        """Approximate volume of the barrel."""
        small_radius = self.small_diameter / 2.0
        large_radius = self.large_diameter / 2.0
        mean_radius = small_radius + (2.0 / 3.0) * (large_radius - small_radius)
        return PI * self.length * mean_radius * mean_radius

    def describe(self) -> str:
        """Multi-line description of the barrel, volume included."""
        return (
            f"Petit diametre : {self.small_diameter:f}\n"
            f"Grand diametre : {self.large_diameter:f}\n"
            f"Longueur : {self.length:f}\n"
            f"Volume : {self.volume():f}\n"
            f"Contenant : {self.contents}\n\n"
        )


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def factorial_iterative(n: int) -> int:
    """n! computed with a loop."""
    _check_non_negative(n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """n! computed recursively."""
    _check_non_negative(n)
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def minor(matrix: Matrix, skip_row: int) -> list[list[float]]:
    """The matrix without row ``skip_row`` and without its first column."""
    return [list(row[1:]) for index, row in enumerate(matrix) if index != skip_row]


def determinant(matrix: Matrix) -> float:
    """Determinant by cofactor expansion along the first column."""
    size = len(matrix)
    if size == 0:
        raise ValueError("the matrix is empty")
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix is not square")
    if size == 1:
        return float(matrix[0][0])
    return sum(
        (-1) ** index * row[0] * determinant(minor(matrix, index))
        for index, row in enumerate(matrix)
    )


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix with one row per line and fixed-width cells."""
    return "".join(
        "".join(f"{value:5.2f} " for value in row) + "\n" for row in matrix
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_matrix(stream: TextIO) -> list[list[float]]:
    """Read a dimension followed by that many rows of numbers."""
    tokens = _tokens(stream)

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    size = int(take())
    if not 0 <= size <= NMAX:
        raise ValueError(f"dimension must be between 0 and {NMAX}, got {size}")
    return [[float(take()) for _ in range(size)] for _ in range(size)]


def fibonacci_naive(n: int) -> int:
    """n-th Fibonacci number by the plain double recursion."""
    _check_non_negative(n)
    if n <= 1:
        return n
    return fibonacci_naive(n - 1) + fibonacci_naive(n - 2)


def fibonacci_fast(n: int) -> int:
    """n-th Fibonacci number using the doubling identities."""
    _check_non_negative(n)
    if n <= 1:
        return n
    if n % 2 == 0:
        half = fibonacci_fast(n // 2)
        return half * half + 2 * fibonacci_fast(n // 2 - 1) * half
    low = fibonacci_fast((n - 1) // 2)
    high = fibonacci_fast((n - 1) // 2 + 1)
    return low * low + high * high


def main(argv: Sequence[str] | None = None) -> int:
    """Read a square matrix from standard input and print its determinant."""
    parser = argparse.ArgumentParser(
        description="Read a square matrix from standard input and print its determinant."
    )
    parser.parse_args(argv)
    try:
        matrix = read_matrix(sys.stdin)
        value = determinant(matrix)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(format_matrix(matrix))
    print()
    print(f"Determinant : {value:f}")
    return 0