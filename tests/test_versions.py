import pytest

from packwiz.versions import (
    AcceptableVersionsError,
    add_acceptable_version,
    compare_versions,
    dedupe_versions,
    is_sorted,
    parse_acceptable_versions,
    remove_acceptable_version,
    sort_versions,
    version_less,
)


@pytest.mark.parametrize(
    "low, high",
    [
        ("1.16.3", "1.16.5"),
        ("1.9", "1.10"),
        ("0.17.1-beta.1", "0.17.1"),
        ("1.19.1", "2.0.0"),
        ("1.19", "1.19.2"),
    ],
)
def test_ordering_is_antisymmetric(low, high):
    assert compare_versions(low, high) == -1
    assert compare_versions(high, low) == 1
    assert version_less(low, high)
    assert not version_less(high, low)


def test_equal_versions_compare_equal():
    assert compare_versions("1.16.5", "1.16.5") == 0


def test_appendix_is_ignored():
    assert compare_versions("1.4.5_01", "1.4.5_01+fabric-1.17") == 0


def test_leading_zeros_are_ignored():
    assert compare_versions("1.05", "1.5") == 0


def test_sort_versions():
    assert sort_versions(["1.16.5", "1.16.3", "1.16.4"]) == ["1.16.3", "1.16.4", "1.16.5"]


def test_is_sorted():
    assert is_sorted(["1.16.3", "1.16.4", "1.16.5"])
    assert not is_sorted(["1.16.5", "1.16.3"])
    assert is_sorted(["1.16.5"])


def test_dedupe_keeps_last_occurrence():
    assert dedupe_versions(["1.16.5", "1.16.4", "1.16.5"]) == ["1.16.4", "1.16.5"]


def test_parse_acceptable_versions():
    assert parse_acceptable_versions("1.16.3,1.16.4,1.16.5") == ["1.16.3", "1.16.4", "1.16.5"]
    assert parse_acceptable_versions("1.16.3,1.16.3") == ["1.16.3"]


def test_add_sorts_result():
    assert add_acceptable_version(["1.16.3", "1.16.5"], "1.16.4") == ["1.16.3", "1.16.4", "1.16.5"]


def test_add_existing_raises():
    with pytest.raises(AcceptableVersionsError):
        add_acceptable_version(["1.16.3"], "1.16.3")


def test_remove():
    assert remove_acceptable_version(["1.16.3", "1.16.4", "1.16.5"], "1.16.4") == ["1.16.3", "1.16.5"]


def test_remove_missing_raises():
    with pytest.raises(AcceptableVersionsError):
        remove_acceptable_version(["1.16.3"], "1.16.4")