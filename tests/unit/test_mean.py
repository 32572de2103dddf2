import pytest

from scor import (
    AT_LEAST_ONE,
    EmptyInputError,
    IncompleteScoreError,
    InvalidRangeError,
    create_to_mean,
    create_to_mean_by_key,
    distribute_score_weights,
    distribute_score_weights_by_key,
    distribute_weights,
    get_zero,
    scor,
    set_weight,
)

MIN = 0
MAX = 10


def by_name(item):
    name, _ = item
    return len(name)


def by_value(item):
    _, value = item
    return value


@pytest.fixture
def name_score():
    return scor(min=MIN, max=MAX, to_value=by_name)


@pytest.fixture
def value_score():
    return scor(min=MIN, max=MAX, to_value=by_value)


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------
def test_sequence_empty():
    with pytest.raises(EmptyInputError, match=AT_LEAST_ONE):
        create_to_mean([])


def test_mapping_empty():
    with pytest.raises(EmptyInputError, match=AT_LEAST_ONE):
        create_to_mean_by_key({})


@pytest.mark.parametrize(
    "score, expected",
    [
        (scor(), "to_value"),
        (scor(max=5), "min"),
        (scor(min=5), "max"),
        (scor(max=5, to_value=get_zero), "min"),
        (scor(min=5, to_value=get_zero), "max"),
        (scor(min=0, max=5), "to_value"),
    ],
)
def test_incomplete_scores_are_rejected(score, expected):
    with pytest.raises(IncompleteScoreError, match=expected):
        create_to_mean([score])
    with pytest.raises(TypeError, match=expected):
        create_to_mean_by_key({"s": score})


def test_incomplete_score_is_named(name_score):
    with pytest.raises(IncompleteScoreError, match="'broken'"):
        create_to_mean_by_key({"ok": name_score, "broken": scor(min=0)})


# ----------------------------------------------------------------------
# Single score
# ----------------------------------------------------------------------
def test_returns_for_item_of_the_only_score():
    score = scor(min=0, max=100, to_value=lambda item: 1)
    assert create_to_mean([score]) == score.for_item
    assert create_to_mean_by_key({"score": score}) == score.for_item


def test_single_score_with_weight_is_still_a_mean(value_score):
    to_mean = create_to_mean([value_score], weights=[0.3])
    assert to_mean(("", 5)) == 0.5


# ----------------------------------------------------------------------
# Arithmetic mean
# ----------------------------------------------------------------------
CASES = [
    (("", MIN), 0),
    (("12345", MIN), 0.25),
    (("", MAX), 0.5),
    (("123456789", 9), 0.9),
    (("1234567890", MAX), 1),
]


@pytest.mark.parametrize("item, expected", CASES)
def test_sequence_arithmetic_mean(name_score, value_score, item, expected):
    to_mean = create_to_mean([name_score, value_score])
    assert to_mean(item) == expected
    assert to_mean(item) == (name_score.for_item(item) + value_score.for_item(item)) / 2


@pytest.mark.parametrize("item, expected", CASES)
def test_mapping_arithmetic_mean(name_score, value_score, item, expected):
    to_mean = create_to_mean_by_key({"name": name_score, "value": value_score})
    assert to_mean(item) == expected


def test_mean_is_reevaluated_on_every_call():
    seen = []

    def recording(item):
        seen.append(item)
        return item

    to_mean = create_to_mean([scor(min=0, max=4, to_value=recording)] * 2)
    assert to_mean(2) == 0.5
    assert to_mean(2) == 0.5
    assert seen == [2, 2, 2, 2]


# ----------------------------------------------------------------------
# Weighted mean
# ----------------------------------------------------------------------
def test_sequence_weighted_mean(name_score, value_score):
    to_mean = create_to_mean([name_score, value_score], weights=[3, 1])
    item = ("12345", MAX)
    expected = (name_score.for_item(item) * 3 + value_score.for_item(item) * 1) / 4
    assert to_mean(item) == expected
    assert to_mean(item) == pytest.approx(0.625)


def test_mapping_weighted_mean(name_score, value_score):
    to_mean = create_to_mean_by_key(
        {"name": name_score, "value": value_score},
        weights={"value": 0.75, "name": 0.25},
    )
    assert to_mean(("", MAX)) == pytest.approx(0.75)


def test_zero_weight_ignores_a_score(name_score, value_score):
    to_mean = create_to_mean([name_score, value_score], weights=[0, 1])
    assert to_mean(("1234567890", 5)) == 0.5


def test_weights_from_distribution(name_score, value_score):
    weights = distribute_weights([0.8, None])
    to_mean = create_to_mean([name_score, value_score], weights=weights)
    assert to_mean(("1234567890", MIN)) == pytest.approx(0.8)


def test_sequence_weights_length_must_match(name_score, value_score):
    with pytest.raises(TypeError):
        create_to_mean([name_score, value_score], weights=[1])


def test_mapping_weight_keys_must_match(name_score, value_score):
    with pytest.raises(TypeError):
        create_to_mean_by_key(
            {"name": name_score, "value": value_score},
            weights={"name": 1, "other": 1},
        )


@pytest.mark.parametrize("bad", [None, -1, float("nan"), float("inf"), "1"])
def test_weights_must_be_numeric_and_not_negative(name_score, value_score, bad):
    with pytest.raises(InvalidRangeError):
        create_to_mean([name_score, value_score], weights=[1, bad])


def test_weights_must_not_sum_to_zero(name_score, value_score):
    with pytest.raises(InvalidRangeError):
        create_to_mean([name_score, value_score], weights=[0, 0])


# ----------------------------------------------------------------------
# Weights configured on the Scores
# ----------------------------------------------------------------------
def test_score_weights_are_used_without_explicit_weights():
    scores = distribute_score_weights([
        scor(min=0, max=1, to_value=lambda item: item[0], weight=0.6),
        scor(min=0, max=1, to_value=lambda item: item[1]),
    ])
    to_mean = create_to_mean(scores)
    assert to_mean((1, 0)) == pytest.approx(0.6)
    assert to_mean((0, 1)) == pytest.approx(0.4)


def test_score_weights_by_key(name_score, value_score):
    scores = distribute_score_weights_by_key({
        "name": set_weight(name_score, 0.25),
        "value": value_score,
    })
    to_mean = create_to_mean_by_key(scores)
    assert to_mean(("", MAX)) == pytest.approx(0.75)


def test_single_weighted_score_is_a_mean(value_score):
    to_mean = create_to_mean([set_weight(value_score, 0.3)])
    assert to_mean(("", 5)) == 0.5


def test_partially_weighted_scores_are_rejected(name_score, value_score):
    with pytest.raises(InvalidRangeError):
        create_to_mean([set_weight(name_score, 0.5), value_score])


def test_explicit_weights_win_over_score_weights(name_score, value_score):
    to_mean = create_to_mean(
        [set_weight(name_score, 1), set_weight(value_score, 0)],
        weights=[0, 1],
    )
    assert to_mean(("1234567890", MIN)) == 0
