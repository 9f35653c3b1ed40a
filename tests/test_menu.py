import io

import pytest

from structalgo.menu import PROMPT, Menu

ITEMS = ["plat", "autre plat", "encore un autre plat"]


@pytest.fixture
def menu():
    return Menu(ITEMS)


def test_max_length(menu):
    assert menu.max_length() == max(len(item) for item in ITEMS)


def test_max_length_empty():
    assert Menu([]).max_length() == -1


def test_render_structure(menu):
    lines = menu.render().splitlines()
    assert len(lines) == len(ITEMS)
    for number, (line, item) in enumerate(zip(lines, ITEMS), start=1):
        assert line.startswith(f"{number} ")
        assert line.endswith(item)
    assert lines[2] == "3 encore un autre plat"


def test_choose_by_label(menu):
    out = io.StringIO()
    assert menu.choose(io.StringIO("autre plat\n"), out) == 2
    assert PROMPT in out.getvalue()
    assert menu.render() in out.getvalue()


def test_choose_retries_then_quits(menu):
    out = io.StringIO()
    assert menu.choose(io.StringIO("pizza\nq\n"), out) == 0
    assert out.getvalue().count(PROMPT) == 2


def test_choose_upper_q(menu):
    assert menu.choose(io.StringIO("Q\n"), io.StringIO()) == 0


def test_choose_end_of_input(menu):
    assert menu.choose(io.StringIO(""), io.StringIO()) == 0


def test_choose_after_wrong_answer(menu):
    out = io.StringIO()
    assert menu.choose(io.StringIO("nope\nencore un autre plat\n"), out) == 3
    assert out.getvalue().count(PROMPT) == 2


def test_too_many_items():
    with pytest.raises(ValueError):
        Menu([f"item {i}" for i in range(21)])


def test_item_too_long():
    with pytest.raises(ValueError):
        Menu(["x" * 60])