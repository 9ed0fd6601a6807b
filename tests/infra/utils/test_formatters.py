import pytest

from infra.utils.formatters import format_duration


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [(0, "0s"), (59.9, "59s"), (61, "1m 01s"), (3_600, "1h 00m 00s"), (90_061, "25h 01m 01s")],
)
def test_format_duration(elapsed: float, expected: str) -> None:
    assert format_duration(elapsed) == expected


def test_format_duration_rejects_negative_values() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        format_duration(-1)
