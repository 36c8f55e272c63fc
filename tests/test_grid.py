import random

import pytest

from core.recall import (
    DECOY_WORDS,
    TARGET_WORDS,
    DecoyEntry,
    GridItem,
    Language,
    TileState,
    WordEntry,
    get_tile_state,
    shuffle_grid,
    validate_word_lists,
)


def _key(item: GridItem):
    return (item.text, item.language, item.is_target, item.position)


@pytest.mark.unit
def test_shuffle_is_permutation_of_targets_and_decoys():
    grid = shuffle_grid(TARGET_WORDS, DECOY_WORDS, random.Random(1))
    assert len(grid) == len(TARGET_WORDS) + len(DECOY_WORDS)

    expected = {(w.text, w.language, True, w.position) for w in TARGET_WORDS}
    expected |= {(d.text, d.language, False, None) for d in DECOY_WORDS}
    assert {_key(item) for item in grid} == expected


@pytest.mark.unit
def test_two_shuffles_share_items():
    first = shuffle_grid(TARGET_WORDS, DECOY_WORDS, random.Random(1))
    second = shuffle_grid(TARGET_WORDS, DECOY_WORDS, random.Random(2))
    assert sorted(map(_key, first), key=str) == sorted(map(_key, second), key=str)


@pytest.mark.unit
def test_same_seed_same_order():
    first = shuffle_grid(TARGET_WORDS, DECOY_WORDS, random.Random(42))
    second = shuffle_grid(TARGET_WORDS, DECOY_WORDS, random.Random(42))
    assert first == second


@pytest.mark.unit
def test_shuffle_without_rng():
    grid = shuffle_grid(TARGET_WORDS, DECOY_WORDS)
    assert len(grid) == 25


@pytest.mark.unit
def test_shuffle_covers_every_slot():
    # Each target should land in the first slot for some seed
    first_texts = {shuffle_grid(TARGET_WORDS[:3], [], random.Random(seed))[0].text for seed in range(200)}
    assert first_texts == {"Apple", "Hund", "Memory"}


@pytest.mark.unit
def test_tile_state_before_submission():
    target = GridItem("Apple", Language.ENGLISH, True, 1)
    decoy = GridItem("Forest", Language.ENGLISH, False)
    assert get_tile_state(target, {"Apple"}, submitted=False) == TileState.SELECTED
    assert get_tile_state(decoy, {"Apple"}, submitted=False) == TileState.IDLE


@pytest.mark.unit
def test_tile_state_after_submission():
    target = GridItem("Apple", Language.ENGLISH, True, 1)
    missed = GridItem("Hund", Language.SWEDISH, True, 2)
    decoy = GridItem("Forest", Language.ENGLISH, False)
    rejected = GridItem("Ocean", Language.ENGLISH, False)
    selection = {"Apple", "Forest"}
    assert get_tile_state(target, selection, submitted=True) == TileState.CORRECT
    assert get_tile_state(missed, selection, submitted=True) == TileState.MISS
    assert get_tile_state(decoy, selection, submitted=True) == TileState.FALSE_POSITIVE
    assert get_tile_state(rejected, selection, submitted=True) == TileState.IDLE


@pytest.mark.unit
def test_static_lists_are_disjoint():
    validate_word_lists(TARGET_WORDS, DECOY_WORDS)
    assert len(TARGET_WORDS) == 15
    assert len(DECOY_WORDS) == 10
    assert [w.position for w in TARGET_WORDS] == list(range(1, 16))


@pytest.mark.unit
def test_colliding_lists_rejected():
    with pytest.raises(ValueError, match="collide"):
        validate_word_lists(TARGET_WORDS, [DecoyEntry("Apple", Language.ENGLISH)])


@pytest.mark.unit
def test_duplicate_targets_rejected():
    targets = [WordEntry("Apple", Language.ENGLISH, 1), WordEntry("Apple", Language.ENGLISH, 2)]
    with pytest.raises(ValueError, match="duplicate"):
        validate_word_lists(targets, [])
