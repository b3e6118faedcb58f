import random

from typetrial.services.anticheat import (
    REASON_ROBOTIC,
    REASON_SPEED,
    DetectorThresholds,
    check_rhythm,
    check_throughput,
    evaluate_submission,
    keystroke_intervals,
)


def test_fast_submission_is_flagged_as_script():
    # 1000 chars in 10 seconds is 100 chars/sec
    verdict = check_throughput("a" * 1000, 10)
    assert not verdict.is_clean
    assert verdict.reason == REASON_SPEED


def test_human_speed_passes_throughput():
    # 10 chars/sec
    assert check_throughput("a" * 1000, 100).is_clean


def test_zero_elapsed_is_floored_at_one_second():
    assert check_throughput("a" * 18, 0).is_clean
    assert check_throughput("a" * 19, 0).reason == REASON_SPEED


def test_empty_text_never_flagged():
    assert check_throughput("", 0).is_clean


def test_uniform_keystrokes_are_robotic():
    timestamps = [i * 100 for i in range(10)]
    verdict = check_rhythm(timestamps)
    assert verdict.reason == REASON_ROBOTIC


def test_jittered_keystrokes_pass():
    rng = random.Random(42)
    timestamps = [0]
    for _ in range(9):
        timestamps.append(timestamps[-1] + rng.randint(60, 260))
    assert check_rhythm(timestamps).is_clean


def test_rhythm_skipped_with_too_few_intervals():
    # 6 timestamps -> 5 intervals, not enough to judge
    assert check_rhythm([0, 100, 200, 300, 400, 500]).is_clean
    # 7 timestamps -> 6 intervals, judged
    assert not check_rhythm([0, 100, 200, 300, 400, 500, 600]).is_clean


def test_missing_or_single_timestamp_skips_rhythm():
    assert keystroke_intervals([]) == []
    assert keystroke_intervals([5]) == []
    assert check_rhythm([]).is_clean
    assert check_rhythm([5]).is_clean


def test_speed_check_wins_over_rhythm():
    timestamps = [i * 100 for i in range(10)]
    verdict = evaluate_submission("a" * 1000, timestamps, 10)
    assert verdict.reason == REASON_SPEED


def test_clean_submission():
    timestamps = [0, 120, 310, 390, 600, 640, 900, 1010]
    assert evaluate_submission("hello world", timestamps, 30).is_clean


def test_thresholds_are_configurable():
    strict = DetectorThresholds(max_chars_per_second=1.0, min_variance=5.0, min_intervals=5)
    assert evaluate_submission("abc", [], 1, strict).reason == REASON_SPEED


def test_rhythm_with_overflowing_spread_is_not_robotic():
    assert check_rhythm([0.0, 1e200] * 5).is_clean
