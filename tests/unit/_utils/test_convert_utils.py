from collections import deque

import pytest
import pandas as pd
import numpy as np

from outliers._utils import convert_from_alias, convert_numpy, convert_series

ERR_MSG_MULTIDIMENSIONAL_DATA = "Input data must be 1-dimensional, but contains {} features"

# tests for convert_series()

@pytest.mark.parametrize("data", [
    [1, 2, 3],
    (1, 2, 3),
    deque([1, 2, 3]),
    range(1, 4),
    np.array([1, 2, 3]),
    np.array([[1, 2, 3]]),
    [[1, 2, 3]],
    pd.Index([1, 2, 3]),
])
def test_convert_series_one_dimensional(data):
    result = convert_series(data)
    assert isinstance(result, pd.Series)
    assert result.tolist() == [1, 2, 3]

def test_convert_series_keeps_series_index_and_name():
    s = pd.Series([1.0, 2.0], index=["a", "b"], name="x")
    result = convert_series(s)
    assert result.index.tolist() == ["a", "b"]
    assert result.name == "x"
    assert result is not s

def test_convert_series_single_column_dataframe():
    df = pd.DataFrame({"x": [1, 2, 3]}, index=[10, 20, 30])
    result = convert_series(df)
    assert result.name == "x"
    assert result.index.tolist() == [10, 20, 30]

def test_convert_series_mapping():
    result = convert_series({"feature": [3, 2, 1]})
    assert result.name == "feature"
    assert result.tolist() == [3, 2, 1]

@pytest.mark.parametrize("data", [None, [], (), {}, np.array([]), pd.DataFrame()])
def test_convert_series_empty(data):
    result = convert_series(data)
    assert result.empty

@pytest.mark.parametrize("data, n_features", [
    ({"a": [1, 2], "b": [3, 4]}, 2),
    (pd.DataFrame({"a": [1, 2], "b": [3, 4], "c": [5, 6]}), 3),
    ([[1, 2], [3, 4]], 2),
    (np.array([[1, 2], [3, 4], [5, 6]]), 3),
])
def test_convert_series_multidimensional(data, n_features):
    with pytest.raises(ValueError, match=ERR_MSG_MULTIDIMENSIONAL_DATA.format(n_features)):
        convert_series(data)

# tests for convert_numpy()

def test_convert_numpy_returns_float_copy():
    data = np.array([3, 1, 2])
    result = convert_numpy(data)
    assert result.dtype == np.float64
    assert result.tolist() == [3.0, 1.0, 2.0]
    result[0] = 100.0
    assert data[0] == 3

def test_convert_numpy_missing_values_become_nan():
    result = convert_numpy([1.0, None, pd.NA])
    assert np.isnan(result[1:]).all()

def test_convert_numpy_non_numeric():
    with pytest.raises(ValueError, match="'values' must contain only real numbers"):
        convert_numpy(["1.0", "abc"], data_name="values")

@pytest.mark.parametrize("data", [
    "123",
    b"123",
    ["1", "2"],
    np.array(["1", "2"]),
    pd.Series(["1", "2"], dtype="string"),
    [1.0, "2"],
    [1 + 2j, 3],
])
def test_convert_numpy_rejects_strings_and_complex(data):
    with pytest.raises(ValueError, match="real numbers"):
        convert_numpy(data)

@pytest.mark.parametrize("data", ["123", b"123"])
def test_convert_series_rejects_bare_strings(data):
    with pytest.raises(ValueError, match="real numbers"):
        convert_series(data)

def test_convert_numpy_object_dtype_with_real_numbers():
    result = convert_numpy(pd.Series([1, 2.5, np.float32(3.0)], dtype=object))
    assert result.tolist() == [1.0, 2.5, 3.0]

# tests for convert_from_alias()

@pytest.mark.parametrize("arg, expected", [
    ("tukey", "inner"),
    ("Near", "inner"),
    ("far", "outer"),
    ("EXTREME", "outer"),
    ("wide", "wide"),
])
def test_convert_from_alias_k_value(arg, expected):
    assert convert_from_alias(arg, path="k_value") == expected

def test_convert_from_alias_restricted_default_values():
    assert convert_from_alias("far", default_values=["inner"], path="k_value") == "far"

def test_convert_from_alias_unknown_path():
    with pytest.raises(KeyError, match="not found"):
        convert_from_alias("far", path="unknown_section")

def test_convert_from_alias_requires_path():
    with pytest.raises(TypeError):
        convert_from_alias("far")
