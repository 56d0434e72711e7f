import pytest

from algolab.kmp import (
    failure_table,
    kmp_search,
    kmp_search_failure,
    kmp_search_optimized,
    main,
    optimized_next,
    prefix_table,
)

CASES = [
    ("abcabdababaca", "ababaca"),
    ("aaaabcd", "abcd"),
    ("ABC ABCDAB ABCDABCDABDE", "ABCDABD"),
    ("aaaaaaab", "aab"),
    ("abababab", "abab"),
    ("hello", "world"),
    ("short", "much longer pattern"),
    ("", "a"),
    ("mississippi", "issip"),
    ("abc", "c"),
]


def test_prefix_table_partial_match_values():
    assert prefix_table("ABCDABD") == [0, 0, 0, 0, 0, 1, 2, 0]


def test_failure_table_partial_match_values():
    assert failure_table("ABCDABD") == [-1, -1, -1, -1, 0, 1, -1]


def test_failure_table_is_prefix_table_shifted():
    for _, pattern in CASES:
        assert failure_table(pattern) == [v - 1 for v in prefix_table(pattern)[1:]]


def test_source_examples():
    assert kmp_search_failure("abcabdababaca", "ababaca") == 6
    assert kmp_search_optimized("aaaabcd", "abcd") == 3


@pytest.mark.parametrize("text,pattern", CASES)
def test_matches_str_find(text, pattern):
    expected = text.find(pattern)
    assert kmp_search(text, pattern) == expected
    assert kmp_search_failure(text, pattern) == expected
    assert kmp_search_optimized(text, pattern) == expected


def test_empty_pattern_matches_at_start():
    assert kmp_search("anything", "") == 0
    assert kmp_search_failure("anything", "") == 0
    assert kmp_search_optimized("anything", "") == 0


@pytest.mark.parametrize("pattern", ["a", "abab", "aaaa", "abcabcab", "ABCDABD"])
def test_optimized_next_shape(pattern):
    table = optimized_next(pattern)
    assert len(table) == len(pattern)
    assert table[0] == -1
    assert all(value < index for index, value in enumerate(table))


def test_main_prints_table_and_position(capsys):
    text, pattern = "abcabdababaca", "ababaca"
    assert main([text, pattern]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(pattern) + 2
    assert lines[-1].endswith(str(text.find(pattern)))


def test_main_rejects_wrong_argument_count(capsys):
    assert main(["only-one"]) == 2