"""Custom exceptions for paramwarden."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Hashable, Iterable


class ConstraintViolation(ValueError):
  """Raised (or collected) when a single rule rejects a field value."""

  def __init__(
    self,
    message: str,
    *,
    key: str,
    rule: str,
    constraint: Any,
    value: Any,
    index: Hashable | None = None,
  ) -> None:
    super().__init__(message)
    self.message = message
    self.key = key
    self.rule = rule
    self.constraint = constraint
    self.value = value
    self.index = index

  def __repr__(self) -> str:
    if self.index is None:
      return f"ConstraintViolation({self.rule!r}, {self.message!r})"
    return f"ConstraintViolation({self.rule!r}, {self.message!r}, index={self.index!r})"


class ParameterValidationError(ValueError):
  """Raised when one or more fields fail validation."""

  def __init__(
    self, violations: Iterable[ConstraintViolation], where: str | None = None
  ) -> None:
    self.violations = list(violations)
    self.where = where
    details = "; ".join(v.message for v in self.violations)
    if where:
      super().__init__(f"Validation failed in '{where}': {details}")
    else:
      super().__init__(details)


class TypeMismatch(TypeError):
  """Raised by strict coercion when a value cannot be read as a number."""


class UnknownConstraintError(KeyError):
  """Raised when a schema names a rule that is not registered."""


class LogicError(Exception):
  """Raised when a schema declares impossible or contradictory constraints."""
