import pytest
import numpy as np

from outliers._utils import (
    validate_array_finite, validate_min_length,
    validate_positive_number, validate_string_flag)


class CustomError(ValueError):
    pass

# tests for validate_string_flag

def test_validate_string_flag_positive_case():
    validate_string_flag(arg="A", supported_values=["A", "B", "C"],
                         err_msg="my_error_message")

def test_validate_string_flag_negative_case():
    with pytest.raises(ValueError, match="my_error_message"):
        validate_string_flag(arg="D", supported_values=["A", "B", "C"],
                             err_msg="my_error_message")

def test_validate_string_flag_custom_error_type():
    with pytest.raises(CustomError):
        validate_string_flag(arg="D", supported_values={"A"},
                             err_msg="my_error_message", error_type=CustomError)

# tests for validate_min_length

@pytest.mark.parametrize("array", [[1, 2], np.array([1.0, 2.0, 3.0]), (1, 2)])
def test_validate_min_length_positive_case(array):
    validate_min_length(array, 2, err_msg="my_error_message")

@pytest.mark.parametrize("array", [[], [1], np.array([])])
def test_validate_min_length_negative_case(array):
    with pytest.raises(CustomError, match="my_error_message"):
        validate_min_length(array, 2, err_msg="my_error_message",
                            error_type=CustomError)

# tests for validate_array_finite

def test_validate_array_finite_positive_case():
    validate_array_finite([1, 2, 3, 4, 5], err_msg="my_error_message")

@pytest.mark.parametrize("array", [
    [1, 2, np.nan, 4, 5],
    [1, np.inf],
    np.array([-np.inf, 0.0]),
])
def test_validate_array_finite_negative_case(array):
    with pytest.raises(ValueError, match="my_error_message"):
        validate_array_finite(array, err_msg="my_error_message")

def test_validate_array_finite_counts_offending_values():
    with pytest.raises(ValueError, match="3 bad values"):
        validate_array_finite([np.nan, 1.0, np.inf, -np.inf],
                              err_msg="{} bad values")

# tests for validate_positive_number

@pytest.mark.parametrize("arg", [1, 0.001, 3.0, np.float64(1.5), np.int64(2)])
def test_validate_positive_number_positive_case(arg):
    validate_positive_number(arg, err_msg="my_error_message")

@pytest.mark.parametrize("arg", [0, -1, -0.5, np.nan, np.inf, True, "1.5", None])
def test_validate_positive_number_negative_case(arg):
    with pytest.raises(ValueError, match="my_error_message"):
        validate_positive_number(arg, err_msg="my_error_message")
