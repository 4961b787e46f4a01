import pytest

from hookrunner.ordering import sort_by_priority


@pytest.mark.parametrize(
    "names, priorities, expected",
    [
        (
            ["10_a", "1_a", "2_a", "5_a"],
            {},
            ["1_a", "2_a", "5_a", "10_a"],
        ),
        (
            ["10_a", "1_a", "2_a", "5_a"],
            {"5_a": 10, "2_a": 1, "10_a": 0},
            ["2_a", "5_a", "1_a", "10_a"],
        ),
    ],
)
def test_sort_commands(names, priorities, expected):
    assert sort_by_priority(names, priorities) == expected


@pytest.mark.parametrize(
    "names, priorities, expected",
    [
        (
            ["10_a.sh", "1_a.sh", "2_a.sh", "5_b.sh"],
            {},
            ["1_a.sh", "2_a.sh", "5_b.sh", "10_a.sh"],
        ),
        (
            ["10.rb", "file.sh", "script.go", "5_a.sh"],
            {"5_a.sh": 10, "script.go": 1, "10.rb": 0},
            ["script.go", "5_a.sh", "10.rb", "file.sh"],
        ),
    ],
)
def test_sort_scripts(names, priorities, expected):
    assert sort_by_priority(names, priorities) == expected


def test_documented_example():
    names = ["1_command", "10command", "3 command", "command5"]
    assert sort_by_priority(names) == ["1_command", "3 command", "10command", "command5"]


def test_does_not_modify_input():
    names = ["10_a", "1_a"]
    result = sort_by_priority(names)
    assert names == ["10_a", "1_a"]
    assert result == ["1_a", "10_a"]


def test_alphabetical_without_numbers():
    names = ["lint", "format", "test"]
    assert sort_by_priority(names) == sorted(names)


def test_result_is_permutation():
    names = ["b", "3x", "a", "1y", "zz", "20"]
    result = sort_by_priority(names, {"zz": 2})
    assert sorted(result) == sorted(names)
    assert result[0] == "zz"


def test_empty():
    assert sort_by_priority([]) == []