"""Value validators: only, format, type and required."""

from __future__ import annotations

from collections.abc import Mapping
import numbers
import re
from typing import TYPE_CHECKING, Any, override

import numpy as np
import pandas as pd

from paramwarden.base import Priority, Validator
from paramwarden.coercion import is_decimal_string
from paramwarden.utils import missing_mask

if TYPE_CHECKING:
  from collections.abc import Callable


class Only(Validator):
  """Validator that a field value is one of an allowed set of values.

  Example:
    ```python
    Only("order", ["asc", "desc"])
    ```
  """

  rule = "only"
  priority = Priority.VALUE

  def __init__(self, key: str, constraint: list[Any] | tuple[Any, ...] | set[Any]) -> None:
    if isinstance(constraint, (str, bytes, Mapping)) or not isinstance(
      constraint, (list, tuple, set, frozenset)
    ):
      raise TypeError(
        f"only constraint must be a list of allowed values, got {type(constraint).__name__}"
      )
    super().__init__(key, tuple(constraint))

  @override
  def is_valid(self, value: Any) -> bool:
    try:
      return value in self.constraint
    except TypeError:
      return False

  @override
  def expectation(self) -> str:
    return f"to be any of {list(self.constraint)}"


class Format(Validator):
  """Validator that a field value matches a regular expression (searched, not anchored)."""

  rule = "format"
  priority = Priority.VALUE

  def __init__(self, key: str, constraint: str) -> None:
    if not isinstance(constraint, str):
      raise TypeError(f"format constraint must be a pattern string, got {constraint!r}")
    super().__init__(key, constraint)
    try:
      self.pattern = re.compile(constraint)
    except re.error as e:
      raise ValueError(f"Invalid format pattern for {key}: {e}") from e

  @override
  def is_valid(self, value: Any) -> bool:
    return self.pattern.search(str(value)) is not None

  @override
  def expectation(self) -> str:
    return f"to match {self.constraint}"


_INTEGER_STRING = re.compile(r"-?\d+")


def _is_integer(value: Any) -> bool:
  if isinstance(value, (bool, np.bool_)):
    return False
  if isinstance(value, numbers.Integral):
    return True
  return isinstance(value, str) and _INTEGER_STRING.fullmatch(value) is not None


def _is_float(value: Any) -> bool:
  if isinstance(value, (bool, np.bool_)):
    return False
  if isinstance(value, numbers.Real):
    return True
  return isinstance(value, str) and is_decimal_string(value)


def _is_boolean(value: Any) -> bool:
  if isinstance(value, (bool, np.bool_)):
    return True
  return isinstance(value, str) and value in {"true", "false"}


def _is_iso8601(value: Any) -> bool:
  if isinstance(value, pd.Timestamp):
    return True
  if not isinstance(value, str):
    return False
  try:
    parsed = pd.to_datetime(value, format="ISO8601")
  except (ValueError, TypeError):
    return False
  return parsed is not pd.NaT


TYPE_CHECKS: dict[str, Callable[[Any], bool]] = {
  "array": lambda value: isinstance(value, (list, tuple)),
  "boolean": _is_boolean,
  "float": _is_float,
  "integer": _is_integer,
  "iso8601": _is_iso8601,
  "object": lambda value: isinstance(value, Mapping),
  "string": lambda value: isinstance(value, str),
}


class Type(Validator):
  """Validator that a field value is of a named type.

  Names: array, boolean, float, integer, iso8601, object, string. Numeric and
  boolean names also accept their string spellings ("42", "1.5", "true"),
  since request parameters arrive as text.
  """

  rule = "type"
  priority = Priority.GATE

  def __init__(self, key: str, constraint: str) -> None:
    if not isinstance(constraint, str) or constraint not in TYPE_CHECKS:
      raise ValueError(
        f"Unknown type {constraint!r} for {key}, expected one of {sorted(TYPE_CHECKS)}"
      )
    super().__init__(key, constraint)
    self.predicate = TYPE_CHECKS[constraint]

  @override
  def is_valid(self, value: Any) -> bool:
    return self.predicate(value)

  @override
  def expectation(self) -> str:
    return f"to be {self.constraint}"


class Required(Validator):
  """Validator that a field is present. `Required(key, False)` accepts anything."""

  rule = "required"
  priority = Priority.STRUCTURAL
  skips_absent = False

  def __init__(self, key: str, constraint: bool = True) -> None:
    super().__init__(key, bool(constraint))

  @override
  def is_valid(self, value: Any) -> bool:
    return not self.constraint or value is not None

  @override
  def expectation(self) -> str:
    return "to be present"

  @override
  def error_message(self, value: Any) -> str:
    return f"Expected {self.key} to be present"

  @override
  def validate_vectorized(self, data: pd.Series) -> np.ndarray:
    if not self.constraint:
      return np.ones(len(data), dtype=bool)
    return np.logical_not(missing_mask(data))
