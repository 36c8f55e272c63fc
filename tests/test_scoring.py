import pytest

from core.recall import (
    DECOY_WORDS,
    TARGET_WORDS,
    Language,
    WordEntry,
    percentage,
    score,
)


TARGET_TEXTS = [w.text for w in TARGET_WORDS]
DECOY_TEXTS = [d.text for d in DECOY_WORDS]


@pytest.mark.unit
def test_first_eight_targets():
    result = score(TARGET_WORDS, set(TARGET_TEXTS[:8]))
    assert result.total_recalled == 8
    assert result.retention_percentage == 53
    assert result.false_positive_count == 0


@pytest.mark.unit
def test_decoys_count_as_false_positives():
    selection = set(TARGET_TEXTS[:5]) | set(DECOY_TEXTS[:2])
    result = score(TARGET_WORDS, selection)
    assert result.false_positive_count == 2
    assert result.total_recalled == 5


@pytest.mark.unit
def test_unknown_words_are_false_positives():
    result = score(TARGET_WORDS, {"Apple", "Zebra", "Quokka"})
    assert result.total_recalled == 1
    assert result.false_positive_count == 2


@pytest.mark.unit
def test_empty_selection():
    result = score(TARGET_WORDS, set())
    assert result.total_recalled == 0
    assert result.retention_percentage == 0
    assert result.false_positive_count == 0
    assert all(rate == 0 for rate in result.recall_rate_by_language.values())


@pytest.mark.unit
def test_per_word_recalled_follows_target_order():
    result = score(TARGET_WORDS, {"Hund", "Horizon"})
    assert [w.text for w in result.per_word_recalled] == TARGET_TEXTS
    recalled = [w.position for w in result.per_word_recalled if w.recalled]
    assert recalled == [2, 15]


@pytest.mark.unit
def test_recall_rate_by_language():
    # 8 English targets, 7 Swedish targets
    english = [w.text for w in TARGET_WORDS if w.language == Language.ENGLISH]
    swedish = [w.text for w in TARGET_WORDS if w.language == Language.SWEDISH]
    result = score(TARGET_WORDS, set(english[:3]) | set(swedish[:7]))
    assert result.recall_rate_by_language[Language.ENGLISH] == 38  # 37.5 rounds up
    assert result.recall_rate_by_language[Language.SWEDISH] == 100


@pytest.mark.unit
def test_rates_are_integers_in_range():
    for n in range(len(TARGET_TEXTS) + 1):
        result = score(TARGET_WORDS, set(TARGET_TEXTS[:n]) | set(DECOY_TEXTS[:2]))
        assert result.total_recalled == n
        for rate in result.recall_rate_by_language.values():
            assert isinstance(rate, int)
            assert 0 <= rate <= 100
        assert 0 <= result.retention_percentage <= 100


@pytest.mark.unit
def test_empty_language_partition_rate_is_zero():
    targets = [WordEntry("Apple", Language.ENGLISH, 1), WordEntry("Pear", Language.ENGLISH, 2)]
    result = score(targets, {"Apple"})
    assert result.recall_rate_by_language[Language.ENGLISH] == 50
    assert result.recall_rate_by_language[Language.SWEDISH] == 0


@pytest.mark.unit
def test_no_targets():
    result = score([], {"Apple"})
    assert result.retention_percentage == 0
    assert result.false_positive_count == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "part, whole, expected",
    [(8, 15, 53), (1, 2, 50), (3, 8, 38), (1, 8, 13), (2, 3, 67), (0, 7, 0), (7, 7, 100), (5, 0, 0)],
)
def test_percentage_rounds_half_up(part, whole, expected):
    assert percentage(part, whole) == expected


@pytest.mark.unit
def test_forgetting_curve_marks_five_minute_point():
    result = score(TARGET_WORDS, set(TARGET_TEXTS[:8]))
    points = result.forgetting_curve_points
    assert [p.label for p in points] == ["0 min", "5 min", "20 min", "1 hr", "1 day", "1 wk"]
    assert [p.reference_retention for p in points] == [100, 58, 44, 36, 28, 23]
    assert points[1].observed_retention == 53
    assert [p.observed_retention for i, p in enumerate(points) if i != 1] == [None] * 5


@pytest.mark.unit
def test_forgetting_curve_follows_distraction_length():
    result = score(TARGET_WORDS, set(TARGET_TEXTS), distract_seconds=45 * 60)
    observed = [p.label for p in result.forgetting_curve_points if p.observed_retention is not None]
    assert observed == ["1 hr"]


@pytest.mark.unit
def test_recall_rates_cannot_be_patched():
    result = score(TARGET_WORDS, {"Apple"})
    with pytest.raises(TypeError):
        result.recall_rate_by_language[Language.ENGLISH] = 999
    assert result.recall_rate_by_language[Language.ENGLISH] == 13
