"""Global configuration for the paramwarden library."""

from __future__ import annotations

import contextlib
import dataclasses
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Iterator


class Coercion(StrEnum):
  """How loosely typed values are turned into numbers."""

  PERMISSIVE = "permissive"  # unparseable -> 0.0, never raises
  STRICT = "strict"  # unparseable -> TypeMismatch


@dataclasses.dataclass
class Config:
  """Global configuration settings.

  Attributes:
    coercion: Numeric coercion policy used by numeric rules that were not given
      an explicit policy (default: permissive).
    skip_validation: Whether to skip validation globally (default: False).
    warn_only: Whether to only warn on validation failures globally (default: False).
    max_reported_rows: Maximum number of violations collected per rule and column
      by `Schema.validate_frame` (default: 5). None collects all of them.
  """

  coercion: Coercion = Coercion.PERMISSIVE
  skip_validation: bool = False
  warn_only: bool = False
  max_reported_rows: int | None = 5


# Singleton instance
_config = Config()


def get_config() -> Config:
  """Get the global configuration."""
  return _config


def reset_config() -> None:
  """Reset configuration to defaults (mostly for testing)."""
  global _config
  _config = Config()


@contextlib.contextmanager
def overrides(**kwargs: Any) -> Iterator[None]:
  """Context manager to temporarily override configuration.

  Useful for:
  - Temporarily disabling validation (skip_validation=True)
  - Switching to warning mode (warn_only=True)
  - Rejecting non-numeric input instead of reading it as 0 (coercion="strict")

  Example:
    ```python
    with overrides(coercion="strict"):
      schema.validate(request_params)
    ```
  """
  # Check every key and value before touching the singleton
  updates: dict[str, Any] = {}
  for key, value in kwargs.items():
    if not hasattr(_config, key):
      raise AttributeError(f"Config has no attribute '{key}'")
    updates[key] = Coercion(value) if key == "coercion" else value

  original = {key: getattr(_config, key) for key in updates}
  try:
    for key, value in updates.items():
      setattr(_config, key, value)
    yield
  finally:
    for key, value in original.items():
      setattr(_config, key, value)
