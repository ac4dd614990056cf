import pytest

from paramwarden import Coercion, Minimum, Schema
from paramwarden.config import get_config, overrides, reset_config


class TestGlobalConfig:
  """Tests for global configuration settings."""

  def setup_method(self):
    """Reset config before each test."""
    reset_config()

  def teardown_method(self):
    """Reset config after each test."""
    reset_config()

  def test_defaults(self):
    config = get_config()
    assert config.coercion is Coercion.PERMISSIVE
    assert config.skip_validation is False
    assert config.warn_only is False
    assert config.max_reported_rows == 5

  def test_overrides_restores_values(self):
    """Test that overrides() restores the previous settings on exit."""
    with overrides(coercion="strict", warn_only=True):
      assert get_config().coercion is Coercion.STRICT
      assert get_config().warn_only is True
    assert get_config().coercion is Coercion.PERMISSIVE
    assert get_config().warn_only is False

  def test_overrides_unknown_attribute(self):
    with pytest.raises(AttributeError, match="Config has no attribute 'colour'"):
      with overrides(colour="red"):
        pass

  def test_overrides_invalid_coercion(self):
    with pytest.raises(ValueError):
      with overrides(coercion="lenient"):
        pass
    assert get_config().coercion is Coercion.PERMISSIVE

  def test_failed_overrides_leave_config_untouched(self):
    """Test that a bad value does not leak earlier overrides from the same call."""
    with pytest.raises(ValueError):
      with overrides(warn_only=True, coercion="bogus"):
        pass
    assert get_config().warn_only is False
    assert get_config().coercion is Coercion.PERMISSIVE

  def test_unknown_key_leaves_config_untouched(self):
    with pytest.raises(AttributeError):
      with overrides(skip_validation=True, colour="red"):
        pass
    assert get_config().skip_validation is False

  def test_explicit_policy_beats_global(self):
    """Test that a validator's own coercion policy ignores the global one."""
    with overrides(coercion="strict"):
      assert Minimum("age", 18, coercion="permissive").check("abc") is False

  def test_reset_config(self):
    get_config().max_reported_rows = 1
    reset_config()
    assert get_config().max_reported_rows == 5

  def test_config_read_at_validation_time(self):
    """Test that a compiled schema picks up config changes later."""
    schema = Schema({"age": {"minimum": 18}})
    assert schema.validate({"age": "abc"}).messages[0].endswith("'abc'")
    with overrides(coercion="strict"):
      assert schema.validate({"age": "abc"}).messages == [
        "Expected age to be numeric, but in fact 'abc'"
      ]
