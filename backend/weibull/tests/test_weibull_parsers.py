"""
Normalizer Test - raw text to ordered observations
Focus: line format, status tokens, silent dropping, ordering, status toggle
"""

import pytest

from weibull.weibull_parsers import format_observations, normalize, parse_line, toggle_status
from weibull.weibull_types import FailureStatus, Observation

F = FailureStatus.FAILURE
S = FailureStatus.SUSPENSION


def test_unlabeled_lines_are_failures():
    obs = normalize("100\n120\n135")
    assert [o.time for o in obs] == [100.0, 120.0, 135.0]
    assert all(o.status == F for o in obs)


@pytest.mark.parametrize("token", ["S", "s", "Susp", "suspended"])
def test_tokens_starting_with_s_are_suspensions(token):
    assert parse_line(f"250 {token}").status == S


@pytest.mark.parametrize("token", ["F", "f", "fail", "x", "R"])
def test_other_tokens_are_failures(token):
    assert parse_line(f"250 {token}").status == F


def test_decimal_times():
    assert parse_line("  12.5 S ").time == 12.5
    assert parse_line(".5").time == 0.5


def test_malformed_number_keeps_leading_value_and_token():
    assert parse_line("1.2.3 S") == Observation(1.2, S)
    assert parse_line("5. s") == Observation(5.0, S)
    assert parse_line("..5") is None


@pytest.mark.parametrize("line", ["", "   ", "abc", "-5", "0", "0.0", "S 100", "."])
def test_unparseable_lines_return_none(line):
    assert parse_line(line) is None


def test_malformed_lines_are_dropped_without_error():
    obs = normalize("100\nabc\n\n-20\n0\n300 S\nhello 5")
    assert obs == [Observation(100.0, F), Observation(300.0, S)]


def test_sorted_by_time():
    obs = normalize("300\n100 S\n200\n50")
    times = [o.time for o in obs]
    assert times == sorted(times)


def test_ties_put_failure_before_suspension():
    obs = normalize("200 S\n200\n100 S\n100")
    assert [(o.time, o.status) for o in obs] == [
        (100.0, F), (100.0, S), (200.0, F), (200.0, S)
    ]


def test_empty_input():
    assert normalize("") == []
    assert normalize("\n\n  \n") == []
    assert normalize(None) == []


def test_windows_line_endings():
    obs = normalize("100\r\n200 S\r\n")
    assert [(o.time, o.status) for o in obs] == [(100.0, F), (200.0, S)]


def test_format_observations():
    text = format_observations([Observation(100.0, F), Observation(12.5, S)])
    assert text == "100 F\n12.5 S"


def test_toggle_status_rewrites_every_line():
    assert toggle_status("300\n100\n200", 1) == "100 F\n200 S\n300 F"


def test_toggle_status_back_to_failure():
    text = toggle_status("100\n200 S", 1)
    assert normalize(text) == [Observation(100.0, F), Observation(200.0, F)]


def test_toggle_status_bad_index():
    with pytest.raises(IndexError):
        toggle_status("100\n200", 2)
    with pytest.raises(IndexError):
        toggle_status("100", -1)
