"""Mapping from constraint names to validator factories.

The mapping is written out explicitly and built once at import time. Schemas
refer to rules by these names, e.g. ``{"age": {"minimum": 18}}``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from paramwarden.base import Validator
from paramwarden.exceptions import UnknownConstraintError
from paramwarden.validators import (
  Format,
  Maximum,
  MaximumLength,
  Minimum,
  MinimumLength,
  Only,
  Required,
  Type,
)

# Factory signature: (key, constraint) -> Validator
ValidatorFactory = Callable[[str, Any], Validator]

REGISTRY: dict[str, ValidatorFactory] = {
  "format": Format,
  "maximum": Maximum,
  "maximum_length": MaximumLength,
  "minimum": Minimum,
  "minimum_length": MinimumLength,
  "only": Only,
  "required": Required,
  "type": Type,
}


def get_validator_class(name: str) -> ValidatorFactory:
  """Look up the factory registered under `name`.

  Raises:
    UnknownConstraintError: If no rule is registered under that name.
  """
  try:
    return REGISTRY[name]
  except KeyError:
    raise UnknownConstraintError(
      f"Unknown constraint '{name}', expected one of {sorted(REGISTRY)}"
    ) from None


def build_validator(name: str, key: str, constraint: Any) -> Validator:
  """Construct the validator for rule `name` on field `key`."""
  validator = get_validator_class(name)(key, constraint)
  if not isinstance(validator, Validator):
    raise TypeError(
      f"Factory for constraint '{name}' returned {type(validator).__name__}, expected a Validator"
    )
  return validator


def register(name: str, factory: ValidatorFactory, *, replace: bool = False) -> None:
  """Add a rule under `name`.

  Args:
    name: The constraint name used in schemas.
    factory: Callable taking (key, constraint) and returning a Validator,
      usually a Validator subclass.
    replace: Allow overwriting an existing registration.
  """
  if not name:
    raise ValueError("Constraint name must be a non-empty string")
  if not callable(factory):
    raise TypeError(f"Factory for constraint '{name}' must be callable")
  if name in REGISTRY and not replace:
    raise ValueError(f"Constraint '{name}' is already registered (pass replace=True)")
  REGISTRY[name] = factory


def unregister(name: str) -> None:
  """Remove a rule added with `register` (mostly for testing)."""
  if name not in REGISTRY:
    raise UnknownConstraintError(f"Unknown constraint '{name}'")
  del REGISTRY[name]
