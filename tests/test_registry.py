from typing import override

import pytest

from paramwarden import (
  REGISTRY,
  Maximum,
  Minimum,
  Schema,
  UnknownConstraintError,
  Validator,
  build_validator,
  register,
)
from paramwarden.registry import get_validator_class, unregister


class MultipleOf(Validator):
  """Validator that a value is a multiple of the constraint."""

  rule = "multiple_of"

  @override
  def is_valid(self, value):
    return float(value) % self.constraint == 0

  @override
  def expectation(self):
    return f"to be a multiple of {self.constraint}"


class TestRegistry:
  """Tests for the constraint name registry."""

  def teardown_method(self):
    REGISTRY.pop("multiple_of", None)

  def test_builtin_rules_registered(self):
    assert set(REGISTRY) == {
      "format",
      "maximum",
      "maximum_length",
      "minimum",
      "minimum_length",
      "only",
      "required",
      "type",
    }

  def test_lookup_minimum(self):
    assert get_validator_class("minimum") is Minimum

  def test_build_validator(self):
    """Test that build_validator constructs with (key, constraint)."""
    v = build_validator("minimum", "age", 18)
    assert v == Minimum("age", 18)
    assert build_validator("maximum", "age", 99) == Maximum("age", 99)

  def test_unknown_name_raises(self):
    with pytest.raises(UnknownConstraintError, match="Unknown constraint 'bogus'"):
      build_validator("bogus", "age", 1)

  def test_unknown_is_key_error(self):
    with pytest.raises(KeyError):
      get_validator_class("bogus")

  def test_register_custom_rule(self):
    """Test that a registered rule is usable from a schema."""
    register("multiple_of", MultipleOf)
    report = Schema({"qty": {"multiple_of": 5}}).validate({"qty": 7})
    assert report.messages == ["Expected qty to be a multiple of 5, but in fact 7"]

  def test_register_duplicate_raises(self):
    with pytest.raises(ValueError, match="already registered"):
      register("minimum", MultipleOf)

  def test_register_replace(self):
    register("multiple_of", MultipleOf)
    register("multiple_of", MultipleOf, replace=True)
    assert REGISTRY["multiple_of"] is MultipleOf

  def test_register_non_callable_raises(self):
    with pytest.raises(TypeError, match="must be callable"):
      register("multiple_of", 5)

  def test_factory_must_return_validator(self):
    register("multiple_of", lambda key, constraint: object())
    with pytest.raises(TypeError, match="expected a Validator"):
      build_validator("multiple_of", "qty", 5)

  def test_unregister(self):
    register("multiple_of", MultipleOf)
    unregister("multiple_of")
    assert "multiple_of" not in REGISTRY
    with pytest.raises(UnknownConstraintError):
      unregister("multiple_of")
