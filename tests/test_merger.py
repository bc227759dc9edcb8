import pytest

from daggerkit.merger import merge_slices


@pytest.mark.parametrize(
    ("slices", "expected"),
    [
        ([["a", "b", "c"]], ["a", "b", "c"]),
        ([["a", "b"], ["c", "d"], ["e", "f"]], ["a", "b", "c", "d", "e", "f"]),
        ([[], [], []], []),
        ([["a", "b"], [], ["c"], []], ["a", "b", "c"]),
        ([[], []], []),
        ([], []),
        ([None], []),
        ([["a"], ["b"], ["c"]], ["a", "b", "c"]),
        ([["a"], ["b", "c"], ["d", "e", "f"]], ["a", "b", "c", "d", "e", "f"]),
    ],
)
def test_merge_slices(slices, expected):
    assert merge_slices(*slices) == expected


def test_merge_skips_none_between_values():
    assert merge_slices(None, ["a", "b"], [], ["g", "h"]) == ["a", "b", "g", "h"]