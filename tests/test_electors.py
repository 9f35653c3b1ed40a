import pytest

from structalgo.electors import (
    EMPTY_MESSAGE,
    Elector,
    ElectorList,
    merge_lists,
)


@pytest.fixture
def sample():
    electors = ElectorList()
    electors.add("Martin", 30, 1)
    electors.add("Bernard", 10, 2)
    electors.add("Dubois", 20, 5)
    electors.add("Petit", 5, 3)
    electors.add("Durand", 15, 4)
    return electors


def test_add_keeps_alphabetical_order(sample):
    names = [e.name for e in sample]
    assert names == sorted(names)
    assert len(sample) == 5


def test_add_duplicate_name_goes_before_existing():
    electors = ElectorList()
    electors.add("Anne", 1, 1)
    electors.add("Anne", 2, 2)
    assert [e.cin for e in electors] == [2, 1]


def test_find_present_and_absent(sample):
    found = sample.find(20)
    assert found == Elector("Dubois", 20, 5)
    assert sample.find(999) is None


def test_remove_present(sample):
    removed = sample.remove(30)
    assert removed.name == "Martin"
    assert len(sample) == 4
    assert sample.find(30) is None


def test_remove_absent_raises(sample):
    with pytest.raises(KeyError):
        sample.remove(999)
    assert len(sample) == 5


def test_split_by_choice(sample):
    left, blank, right = sample.split()
    assert {e.choice for e in left} <= {1, 3}
    assert {e.choice for e in right} <= {2, 4}
    assert [e.name for e in blank] == ["Dubois"]
    assert len(left) + len(blank) + len(right) == len(sample)
    assert [e.name for e in left] == sorted(e.name for e in left)


def test_split_copies_electors(sample):
    left, _, _ = sample.split()
    left.remove(30)
    assert sample.find(30) is not None and sample.find(30).name == "Martin"


def test_sort_by_cin(sample):
    sample.sort_by_cin()
    cins = [e.cin for e in sample]
    assert cins == sorted(cins)


def test_sort_by_cin_is_stable():
    electors = ElectorList([Elector("b", 2, 1), Elector("a", 2, 1), Elector("c", 1, 1)])
    electors.sort_by_cin()
    assert [e.name for e in electors] == ["c", "b", "a"]


def test_sort_empty():
    electors = ElectorList()
    electors.sort_by_cin()
    assert list(electors) == []


def test_count_left(sample):
    assert sample.count_left() == len(sample.split()[0])


def test_format_empty():
    assert ElectorList().format() == EMPTY_MESSAGE


def test_format_lists_everyone(sample):
    text = sample.format()
    assert text.startswith("\n--------- Voici la liste des electeurs ---------\n")
    for elector in sample:
        assert f"\nNom : {elector.name}\nNumero electeur : {elector.cin}\nVote : {elector.choice}\n" in text


def test_merge_lists_sorted(sample):
    left, _, right = sample.split()
    left.sort_by_cin()
    right.sort_by_cin()
    merged = merge_lists(left, right)
    cins = [e.cin for e in merged]
    assert cins == sorted(cins)
    assert len(merged) == len(left) + len(right)


def test_merge_lists_tie_takes_right_first():
    left = ElectorList([Elector("l", 7, 1)])
    right = ElectorList([Elector("r", 7, 2)])
    assert [e.name for e in merge_lists(left, right)] == ["r", "l"]


def test_merge_with_empty():
    right = ElectorList([Elector("r", 1, 2), Elector("s", 4, 4)])
    assert [e.cin for e in merge_lists(ElectorList(), right)] == [1, 4]
    assert [e.cin for e in merge_lists(right, ElectorList())] == [1, 4]