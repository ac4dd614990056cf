from __future__ import annotations

from hypothesis import assume, given, strategies as st

from paramwarden import Minimum

bounds = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
ints = st.integers(min_value=-10_000, max_value=10_000)


@given(constraint=bounds)
def test_absent_always_passes(constraint):
  """Property: None passes for every bound."""
  assert Minimum("field", constraint).validate(None).passed


@given(constraint=bounds, delta=st.floats(min_value=0, max_value=1e6))
def test_values_at_or_above_bound_pass(constraint, delta):
  """Property: v >= c passes."""
  value = constraint + delta
  assert Minimum("field", constraint).validate(value).passed


@given(constraint=bounds, value=bounds)
def test_values_below_bound_fail_with_context(constraint, value):
  """Property: v < c fails and the message names both v and c."""
  assume(value < constraint)
  result = Minimum("field", constraint).validate(value)
  assert not result.passed
  assert repr(value) in result.message
  assert str(constraint) in result.message


@given(constraint=ints, value=ints)
def test_numeric_strings_compare_by_number(constraint, value):
  """Property: integer strings behave like the integers they spell."""
  assert Minimum("field", constraint).check(str(value)) is (value >= constraint)


@given(constraint=ints, value=st.one_of(st.none(), ints, st.text(max_size=8)))
def test_validation_is_idempotent(constraint, value):
  """Property: repeated validation yields the same result."""
  v = Minimum("field", constraint)
  assert v.validate(value) == v.validate(value)
