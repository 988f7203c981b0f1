from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from bktreex.metrics import (
    available_kernels,
    kernel_name,
    levenshtein,
    levenshtein_numba,
    resolve_distance,
)

KERNELS = pytest.mark.parametrize("distance", [levenshtein, levenshtein_numba], ids=["python", "numba"])

_words = st.text(alphabet="abcdeé漢", max_size=10)
# every code point, lone surrogates included
_any_text = st.text(alphabet=st.characters(exclude_categories=()), max_size=12)


@KERNELS
@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
        ("", "", 0),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
        ("Kevin van Zonneveld", "Kevin van Sommeveld", 3),
        ("café", "cafe", 1),
        ("漢字", "漢", 1),
        ("a\ud800", "a", 1),
        ("ab\udc00", "abc", 1),
        ("\ud800\udc00", "\U00010000", 2),
    ],
)
def test_known_distances(distance, a: str, b: str, expected: int) -> None:
    assert distance(a, b) == expected


@KERNELS
def test_distance_counts_code_points_not_bytes(distance) -> None:
    # one code point each, several UTF-8 bytes each
    assert distance("😀", "😃") == 1
    assert distance("😀x", "x") == 1


@KERNELS
@pytest.mark.parametrize("bad", [None, 3, b"abc", ["a", "b"]])
def test_non_text_inputs_are_rejected(distance, bad) -> None:
    with pytest.raises(TypeError):
        distance(bad, "abc")
    with pytest.raises(TypeError):
        distance("abc", bad)


@KERNELS
@settings(max_examples=75, deadline=None)
@given(a=_words, b=_words, c=_words)
def test_metric_laws(distance, a: str, b: str, c: str) -> None:
    assert distance(a, a) == 0
    assert distance(a, b) == distance(b, a)
    assert distance(a, c) <= distance(a, b) + distance(b, c)
    if a != b:
        assert distance(a, b) > 0
    assert abs(len(a) - len(b)) <= distance(a, b) <= max(len(a), len(b))


@settings(max_examples=100, deadline=None)
@given(a=_any_text, b=_any_text)
def test_kernels_agree(a: str, b: str) -> None:
    assert levenshtein(a, b) == levenshtein_numba(a, b)


def test_resolve_distance_explicit_flag() -> None:
    assert resolve_distance(True) is levenshtein_numba
    assert resolve_distance(False) is levenshtein


def test_kernel_registry_names() -> None:
    assert available_kernels() == ("python", "numba")
    assert kernel_name(levenshtein) == "python"
    assert kernel_name(levenshtein_numba) == "numba"


@KERNELS
def test_lone_surrogates_count_as_single_characters(distance) -> None:
    assert distance("a\ud800", "a") == 1
    assert distance("\udc00", "\ud800") == 1
    assert distance("ab\udc00", "ab\udc00") == 0
