import io
import math

import pytest

from structalgo.numerics import (
    Barrel,
    determinant,
    factorial_iterative,
    factorial_recursive,
    fibonacci_fast,
    fibonacci_naive,
    format_matrix,
    main,
    minor,
    read_matrix,
)


@pytest.mark.parametrize("n", range(0, 13))
def test_factorials_agree_with_stdlib(n):
    assert factorial_iterative(n) == math.factorial(n)
    assert factorial_recursive(n) == math.factorial(n)


@pytest.mark.parametrize("func", [factorial_iterative, factorial_recursive])
def test_factorial_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-1)


def test_fibonacci_base_cases():
    assert fibonacci_naive(0) == 0
    assert fibonacci_naive(1) == 1
    assert fibonacci_fast(0) == 0
    assert fibonacci_fast(1) == 1


@pytest.mark.parametrize("n", range(0, 22))
def test_fibonacci_fast_matches_naive(n):
    assert fibonacci_fast(n) == fibonacci_naive(n)


@pytest.mark.parametrize("n", range(2, 40))
def test_fibonacci_fast_recurrence(n):
    assert fibonacci_fast(n) == fibonacci_fast(n - 1) + fibonacci_fast(n - 2)


@pytest.mark.parametrize("func", [fibonacci_naive, fibonacci_fast])
def test_fibonacci_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-3)


def test_minor_drops_row_and_first_column():
    assert minor([[1, 2], [3, 4]], 0) == [[4]]
    assert minor([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 1) == [[2, 3], [8, 9]]


def test_determinant_of_single_cell():
    assert determinant([[7.5]]) == 7.5


def test_determinant_triangular_is_diagonal_product():
    matrix = [[2.0, 5.0, 1.0], [0.0, 3.0, 4.0], [0.0, 0.0, 6.0]]
    assert determinant(matrix) == pytest.approx(math.prod([2.0, 3.0, 6.0]))


def test_determinant_row_swap_changes_sign():
    matrix = [[1.0, 2.0, 0.5], [3.0, -1.0, 2.0], [4.0, 0.0, 1.0]]
    swapped = [matrix[1], matrix[0], matrix[2]]
    assert determinant(swapped) == pytest.approx(-determinant(matrix))


def test_determinant_with_zero_row():
    assert determinant([[1.0, 2.0], [0.0, 0.0]]) == 0


def test_determinant_errors():
    with pytest.raises(ValueError):
        determinant([])
    with pytest.raises(ValueError):
        determinant([[1.0, 2.0], [3.0]])


def test_format_matrix_cell_width():
    assert format_matrix([[1.5]]) == " 1.50 \n"


def test_format_matrix_one_line_per_row():
    text = format_matrix([[1.0, 2.0], [3.0, 4.0]])
    lines = text.splitlines()
    assert len(lines) == 2
    assert all(len(line) == 12 for line in lines)


def test_read_matrix_round_trip():
    stream = io.StringIO("2\n1 2\n3 4\n")
    assert read_matrix(stream) == [[1.0, 2.0], [3.0, 4.0]]


def test_read_matrix_errors():
    with pytest.raises(ValueError):
        read_matrix(io.StringIO("11\n"))
    with pytest.raises(ValueError):
        read_matrix(io.StringIO("2\n1 2 3\n"))
    with pytest.raises(ValueError):
        read_matrix(io.StringIO("1\nabc\n"))


def test_barrel_volume_scales_with_length():
    short = Barrel(30.0, 50.0, 10.0, "VIN")
    long = Barrel(30.0, 50.0, 20.0, "VIN")
    assert long.volume() == pytest.approx(2 * short.volume())


def test_barrel_volume_grows_with_diameter():
    assert Barrel(30.0, 60.0, 10.0).volume() > Barrel(30.0, 50.0, 10.0).volume()


def test_barrel_describe():
    barrel = Barrel(30.0, 50.0, 10.0, "VIN")
    text = barrel.describe()
    assert text.startswith("Petit diametre : 30.000000\n")
    assert "Contenant : VIN\n" in text
    assert f"Volume : {barrel.volume():f}\n" in text
    assert text.endswith("\n\n")


def test_main_prints_determinant(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 2\n3 4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("Determinant : -2.000000\n")
    assert format_matrix([[1.0, 2.0], [3.0, 4.0]]) in out


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 2\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err