import pandas as pd
import pytest

from outliers import ClassificationResult, Fences
from outliers.partition import LABELS, contains_outliers, label_values, partition

FENCES = Fences(lower=0.0, upper=10.0, iqr=4.0, k_value=1.5)

# tests for partition()

def test_partition_deterministic():
    result = partition([12.0, 0.0, 5.0, -1.0, 10.0, -3.0, 11.0], FENCES)
    assert result == ClassificationResult([-1.0, -3.0], [0.0, 5.0, 10.0], [12.0, 11.0])

def test_partition_fences_are_inclusive():
    result = partition([0.0, 10.0], FENCES)
    assert result.lower_outliers == []
    assert result.non_outliers == [0.0, 10.0]
    assert result.upper_outliers == []

def test_partition_keeps_duplicates_and_order():
    data = [7.0, 3.0, 7.0, 11.0, 3.0, 11.0, -2.0, -2.0]
    lower, non, upper = partition(data, FENCES).as_tuple()
    assert lower == [-2.0, -2.0]
    assert non == [7.0, 3.0, 7.0, 3.0]
    assert upper == [11.0, 11.0]

def test_partition_empty_data():
    assert partition([], FENCES) == ClassificationResult()

def test_partition_returns_floats():
    result = partition([1, 2, 30], FENCES)
    assert all(isinstance(v, float) for v in result.non_outliers + result.outliers)

def test_classification_result_outliers():
    result = ClassificationResult([-5.0], [1.0, 2.0], [20.0, 30.0])
    assert result.outliers == [-5.0, 20.0, 30.0]

# tests for label_values()

def test_label_values_keeps_index_and_name():
    data = pd.Series([12.0, 5.0, -1.0, 10.0], index=["a", "b", "c", "d"], name="x")
    labels = label_values(data, FENCES)
    assert labels.tolist() == ["upper", "non", "lower", "non"]
    assert labels.index.tolist() == ["a", "b", "c", "d"]
    assert labels.name == "x"
    assert list(labels.cat.categories) == list(LABELS)

# tests for contains_outliers()

@pytest.mark.parametrize("data, expected", [
    ([0.0, 5.0, 10.0], False),
    ([0.0, 5.0, 10.5], True),
    ([-0.5, 5.0], True),
    ([], False),
])
def test_contains_outliers(data, expected):
    assert contains_outliers(data, FENCES) is expected

def test_contains_outliers_stops_at_first_outlier():
    seen = []

    def values():
        for v in [1.0, 50.0, 2.0, 3.0]:
            seen.append(v)
            yield v

    assert contains_outliers(values(), FENCES)
    assert seen == [1.0, 50.0]

def test_groups_never_overlap_with_inverted_fences():
    inverted = Fences(lower=float("inf"), upper=float("-inf"), iqr=float("inf"), k_value=1.5)
    data = [1.0, -5.0, 3.0]
    lower, non, upper = partition(data, inverted).as_tuple()
    assert lower == data
    assert non == upper == []
    labels = label_values(pd.Series(data), inverted)
    assert labels.tolist() == ["lower"] * len(data)
    assert contains_outliers(data, inverted)
