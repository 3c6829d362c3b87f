import pytest

from fuzzyedit.match.similarity import CHAR_LEVEL_LIMIT, lcs_length, similarity


def _lcs_table(a, b):
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0]
        for j, y in enumerate(b):
            cur.append(prev[j] + 1 if x == y else max(prev[j + 1], cur[j]))
        prev = cur
    return prev[-1]


@pytest.mark.parametrize(
    "a,b",
    [
        ("ABCBDAB", "BDCABA"),
        ("abc", "abc"),
        ("ab", "ba"),
        ("computeTotal", "computeTotl"),
        ("aaaa", "aa"),
        ("xyz", "abc"),
        ("    return x;", "return value;"),
    ],
)
def test_lcs_length_agrees_with_dp_table(a, b):
    assert lcs_length(a, b) == _lcs_table(a, b)


def test_lcs_length_known_value():
    assert lcs_length("ABCBDAB", "BDCABA") == 4


def test_lcs_length_over_lines():
    assert lcs_length(["a", "b", "c"], ["a", "x", "c"]) == 2


def test_lcs_length_empty():
    assert lcs_length("", "abc") == 0
    assert lcs_length([], []) == 0


def test_similarity_bounds():
    assert similarity("", "") == 1.0
    assert similarity("abc", "") == 0.0
    assert similarity("", "abc") == 0.0
    assert similarity("same", "same") == 1.0
    assert similarity("abc", "xyz") == 0.0


def test_similarity_is_lcs_over_longer_length():
    assert similarity("computeTotl", "computeTotal") == pytest.approx(11 / 12)


def test_similarity_large_texts_use_line_estimate():
    a = "\n".join(f"line number {i} with some padding text" for i in range(60))
    b = "\n".join(
        f"line number {i} with some padding text" if i % 2 else f"changed {i}" for i in range(60)
    )
    assert len(a) > CHAR_LEVEL_LIMIT
    score = similarity(a, b)
    assert 0.3 < score < 0.9
    assert similarity(a, a) == 1.0
