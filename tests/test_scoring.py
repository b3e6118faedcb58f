from datetime import datetime, timezone

import pytest

from typetrial.services.scoring import (
    build_record,
    compute_metrics,
    count_correct_chars,
    round_half_up,
)


def test_perfect_minute_of_hello_world():
    metrics = compute_metrics("hello world", "hello world", 60)
    assert metrics.correct_chars == 11
    assert metrics.accuracy == 100
    assert metrics.wpm == 2
    assert metrics.score == 20


def test_positional_matching_ignores_overlap_tail():
    assert count_correct_chars("abc", "abcdef") == 3
    assert count_correct_chars("abcdef", "abc") == 3
    assert count_correct_chars("abc", "xbc") == 2
    assert count_correct_chars("", "abc") == 0


def test_extra_typed_chars_lower_accuracy():
    metrics = compute_metrics("abcd", "abcdefgh", 60)
    assert metrics.correct_chars == 4
    assert metrics.accuracy == 50


def test_empty_typed_text_has_zero_accuracy():
    metrics = compute_metrics("hello", "", 30)
    assert metrics.accuracy == 0
    assert metrics.wpm == 0
    assert metrics.score == 0


def test_zero_elapsed_gives_finite_wpm():
    metrics = compute_metrics("hello world", "hello world", 0)
    # floored to one second: (11 / 5) / (1 / 60) = 132
    assert metrics.wpm == 132
    assert metrics.score == 1320


@pytest.mark.parametrize(
    "target, typed",
    [
        ("the quick brown fox", "the quick brown fox"),
        ("the quick brown fox", "teh quikc"),
        ("short", "much longer than the target"),
        ("abc", "xyz"),
        ("", "anything"),
    ],
)
def test_accuracy_bounds(target, typed):
    metrics = compute_metrics(target, typed, 12.5)
    assert 0 <= metrics.accuracy <= 100
    assert metrics.correct_chars <= min(len(target), len(typed))
    assert metrics.score >= 0


def test_rounding_is_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(0) == 0


def test_build_record_stamps_date():
    now = datetime(2026, 3, 14, 9, 26, 53, 589000, tzinfo=timezone.utc)
    record = build_record("Ada", "hello world", "hello world", 60, now=now)
    assert record.name == "Ada"
    assert record.score == 20
    assert record.date == "2026-03-14 09:26:53"
