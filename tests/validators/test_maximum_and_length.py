"""Tests for Maximum, MinimumLength and MaximumLength validators."""
# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false

import pandas as pd
import pytest

from paramwarden import Maximum, MaximumLength, MinimumLength


class TestMaximum:
  """Tests for Maximum validator."""

  def test_equal_to_bound_passes(self):
    assert Maximum("limit", 100).check(100) is True

  def test_above_bound_fails(self):
    """Test the failure message for a value over the bound."""
    result = Maximum("limit", 100).validate("101")
    assert result.message == "Expected limit to be equal or less than 100, but in fact '101'"

  def test_absent_passes(self):
    assert Maximum("limit", 100).check(None) is True

  def test_permissive_garbage_reads_as_zero(self):
    """Test that unreadable values read as 0 and pass an upper bound."""
    assert Maximum("limit", 100).check("abc") is True

  def test_vectorized(self):
    data = pd.Series([50, 150, None])
    assert Maximum("limit", 100).validate_vectorized(data).tolist() == [True, False, True]


class TestMinimumLength:
  """Tests for MinimumLength validator."""

  def test_short_string_fails(self):
    result = MinimumLength("name", 3).validate("ab")
    assert result.message == (
      "Expected name to be longer than or equal to 3 characters, but in fact 'ab'"
    )

  def test_exact_length_passes(self):
    assert MinimumLength("name", 3).check("abc") is True

  def test_non_sized_value_uses_string_form(self):
    """Test that numbers are measured by their string form."""
    assert MinimumLength("code", 6).check(123456) is True
    assert MinimumLength("code", 6).check(12345) is False

  def test_negative_constraint_raises(self):
    with pytest.raises(ValueError, match="non-negative integer"):
      MinimumLength("name", -1)

  def test_vectorized_skips_missing(self):
    data = pd.Series(["abcd", "a", None], dtype=object)
    assert MinimumLength("name", 2).validate_vectorized(data).tolist() == [True, False, True]


class TestMaximumLength:
  """Tests for MaximumLength validator."""

  def test_long_string_fails(self):
    result = MaximumLength("name", 3).validate("abcd")
    assert result.message == (
      "Expected name to be shorter than or equal to 3 characters, but in fact 'abcd'"
    )

  def test_list_length(self):
    """Test that sized values use their item count."""
    assert MaximumLength("tags", 2).check(["a", "b"]) is True
    assert MaximumLength("tags", 2).check(["a", "b", "c"]) is False

  def test_bool_constraint_raises(self):
    with pytest.raises(ValueError, match="non-negative integer"):
      MaximumLength("name", True)
