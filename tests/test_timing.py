import time

import pytest

from phone_book.timing import format_duration, measure_time, print_measured


def test_measure_time_returns_result_and_duration():
    result, elapsed = measure_time(lambda: sum(range(10)))
    assert result == 45
    assert elapsed >= 0


def test_measure_time_counts_milliseconds():
    _, elapsed = measure_time(lambda: time.sleep(0.02))
    assert elapsed >= 15


def test_measure_time_propagates_errors():
    def fail():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        measure_time(fail)


@pytest.mark.parametrize("ms, expected", [
    (0, "00 min. 00 sec. 000 ms."),
    (5, "00 min. 00 sec. 005 ms."),
    (61_234, "01 min. 01 sec. 234 ms."),
    (116_328, "01 min. 56 sec. 328 ms."),
    (3_725_001, "62 min. 05 sec. 001 ms."),
    (999.6, "00 min. 01 sec. 000 ms."),
])
def test_format_duration(ms, expected):
    assert format_duration(ms) == expected


def test_print_measured(capsys):
    assert print_measured("Reading data file...", lambda: ["1 Doe"]) == ["1 Doe"]
    out = capsys.readouterr().out
    assert out.startswith("Reading data file... ")
    assert out.rstrip().endswith("ms")
