import pytest

from app_cracks.utils.normalizers import parse_time
from app_cracks.utils.row_classifier import (
    BLOCK_MISSING,
    INVALID_END,
    INVALID_START,
    START_AFTER_END,
    TIMES_NOT_PAIRED,
    RowClassifier,
    RowKind,
    validate_times,
)

BLANK = [None] * 11


@pytest.fixture
def classifier():
    names = {}

    def resolve(name):
        return names.setdefault(name, len(names) + 1)

    instance = RowClassifier(resolve)
    instance.names = names
    return instance


def test_data_row_is_normalized(classifier, data_row):
    decision = classifier.classify(data_row(block=" A1 ", start="3 min 47 sec", end="227"))
    assert decision.kind is RowKind.DATA
    data = decision.data
    assert data.block_id == classifier.names["A1"]
    assert data.chainage_from == "10+100"
    assert data.rl == 12.5
    assert data.length_mm == 150.0
    assert data.height_mm == 0.0
    assert data.start_time == "00:03:47"
    assert data.end_time == "00:03:47"


def test_fill_down_uses_last_block(classifier, data_row):
    classifier.classify(data_row(block="B2"))
    decision = classifier.classify(data_row(block=None))
    assert decision.kind is RowKind.DATA
    assert decision.data.block_id == classifier.names["B2"]


def test_missing_block_without_previous(classifier, data_row):
    decision = classifier.classify(data_row(block=None))
    assert decision.kind is RowKind.ERROR
    assert decision.error == BLOCK_MISSING


def test_short_row_is_padded(classifier):
    decision = classifier.classify(["A1", "0", None, None, "Spall"])
    assert decision.kind is RowKind.DATA
    assert decision.data.chainage_from == "0"
    assert decision.data.start_time is None


def test_rl_and_video_only_is_filler(classifier):
    row = ["A1", None, None, 5.0, None, None, None, None, "clip.mp4", None, None]
    assert classifier.classify(row).kind is RowKind.FILLER


def test_zero_dimensions_are_not_content(classifier):
    row = ["A1", None, None, None, None, 0, 0, 0, None, None, None]
    assert classifier.classify(row).kind is RowKind.FILLER


def test_blank_run_stops_on_fifth_row(classifier):
    kinds = [classifier.classify(BLANK).kind for _ in range(5)]
    assert kinds == [RowKind.BLANK] * 4 + [RowKind.STOP]


def test_filler_rows_count_towards_stop(classifier):
    filler = ["A1"] + [None] * 10
    kinds = [classifier.classify(row).kind for row in [BLANK, filler, BLANK, filler, filler]]
    assert kinds[-1] is RowKind.STOP


def test_data_resets_blank_run(classifier, data_row):
    for _ in range(4):
        classifier.classify(BLANK)
    classifier.classify(data_row())
    assert classifier.consecutive_empty == 0
    assert classifier.classify(BLANK).kind is RowKind.BLANK


def test_error_row_does_not_reset_blank_run(classifier, data_row):
    for _ in range(4):
        classifier.classify(BLANK)
    assert classifier.classify(data_row(end=None)).kind is RowKind.ERROR
    assert classifier.classify(BLANK).kind is RowKind.STOP


@pytest.mark.parametrize(
    "raw_start, raw_end, expected",
    [
        ("abc", "00:01:00", INVALID_START),
        ("00:01:00", "abc", INVALID_END),
        ("00:01:00", None, TIMES_NOT_PAIRED),
        (None, "00:01:00", TIMES_NOT_PAIRED),
        ("00:05:00", "00:01:00", START_AFTER_END),
        ("00:01:00", "00:01:00", None),
        (None, None, None),
    ],
)
def test_validate_times(raw_start, raw_end, expected):
    assert validate_times(raw_start, raw_end, parse_time(raw_start), parse_time(raw_end)) == expected


def test_start_after_end_compares_as_time(classifier, data_row):
    decision = classifier.classify(data_row(start="9:00:00", end="10:00:00"))
    assert decision.kind is RowKind.DATA
