"""Base classes for validators."""

from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar, override

import numpy as np

from paramwarden.exceptions import ConstraintViolation
from paramwarden.utils import missing_mask, object_values

if TYPE_CHECKING:
  from collections.abc import Hashable

  import pandas as pd


class Priority(IntEnum):
  """Execution priority for validators within one field (lower runs earlier).

  A failure at GATE priority or below stops the remaining rules for the field.
  """

  STRUCTURAL = 0  # Presence
  GATE = 10  # Type checks
  VALUE = 20  # Bounds, lengths, sets, patterns
  DEFAULT = 50  # Unknown/User-defined


@dataclasses.dataclass(frozen=True, slots=True)
class ValidationResult:
  """Outcome of validating one value: pass, or fail with a message."""

  passed: bool
  message: str | None = None

  def __bool__(self) -> bool:
    return self.passed

  @classmethod
  def success(cls) -> ValidationResult:
    return _PASSED

  @classmethod
  def failure(cls, message: str) -> ValidationResult:
    return cls(False, message)


_PASSED = ValidationResult(True)


class Validator:
  """Base class for validators.

  A validator is built once with the field key and its declared constraint and
  then called for every value of that field. It keeps no state between calls.

  Subclasses implement `is_valid` and `expectation`; the message template and
  the handling of absent values live here.
  """

  rule: ClassVar[str] = ""
  priority: ClassVar[int] = Priority.DEFAULT
  # Absent (None) values pass without calling is_valid
  skips_absent: ClassVar[bool] = True

  def __init__(self, key: str, constraint: Any) -> None:
    super().__init__()
    if not isinstance(key, str) or not key:
      raise ValueError(f"{self.__class__.__name__} key must be a non-empty string")
    self.key = key
    self.constraint = constraint

  def is_valid(self, value: Any) -> bool:
    """Return True if a present value satisfies the constraint."""
    raise NotImplementedError

  def expectation(self) -> str:
    """Describe what the field is expected to be, e.g. 'to be equal or higher than 5'."""
    raise NotImplementedError

  def error_message(self, value: Any) -> str:
    return f"Expected {self.key} {self.expectation()}, but in fact {value!r}"

  def validate(self, value: Any) -> ValidationResult:
    """Validate one value.

    Returns a passing result, or a failing one carrying the rendered message.
    """
    if value is None and self.skips_absent:
      return ValidationResult.success()
    if self.is_valid(value):
      return ValidationResult.success()
    return ValidationResult.failure(self.error_message(value))

  def violation(
    self,
    value: Any,
    *,
    message: str | None = None,
    index: Hashable | None = None,
  ) -> ConstraintViolation:
    """Build the violation reported for a value this validator rejected."""
    return ConstraintViolation(
      message if message is not None else self.error_message(value),
      key=self.key,
      rule=self.rule,
      constraint=self.constraint,
      value=value,
      index=index,
    )

  def check(self, value: object) -> bool:
    """Check constraint for a scalar value."""
    return self.validate(value).passed

  def describe(self) -> str:
    """Return a descriptive string for the validator."""
    return f"{self.key} {self.expectation()}"

  def validate_vectorized(self, data: pd.Series) -> np.ndarray:
    """Validate all values of a Series.

    Returns a boolean mask where True means valid. Absent entries (None, NaN,
    NaT, pd.NA) are valid when the validator skips absent values.

    The default implementation checks present values one by one; subclasses
    with a cheaper array form override it.
    """
    missing = missing_mask(data)
    values = object_values(data)
    mask = np.ones(len(values), dtype=bool)
    for pos in np.flatnonzero(np.logical_not(missing)):
      mask[pos] = self.is_valid(values[pos])
    if not self.skips_absent:
      for pos in np.flatnonzero(missing):
        mask[pos] = self.is_valid(None)
    return mask

  @override
  def __repr__(self) -> str:
    return f"{self.__class__.__name__}({self.key!r}, {self.constraint!r})"

  @override
  def __eq__(self, other: object) -> bool:
    """Check equality based on type, key and constraint."""
    if not isinstance(other, type(self)):
      return NotImplemented
    return (self.key, self.constraint) == (other.key, other.constraint)

  @override
  def __hash__(self) -> int:
    return hash((type(self), self.key, self.constraint))
