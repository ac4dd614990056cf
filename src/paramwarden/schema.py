"""Schema compilation and per-field validation."""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from typing import TYPE_CHECKING, Any

from loguru import logger
import numpy as np
import pandas as pd

from paramwarden.base import Priority, Validator
from paramwarden.config import get_config
from paramwarden.exceptions import (
  ConstraintViolation,
  LogicError,
  ParameterValidationError,
  TypeMismatch,
)
from paramwarden.registry import build_validator
from paramwarden.utils import is_missing, object_values

if TYPE_CHECKING:
  from collections.abc import Hashable, Iterator

# (lower rule, upper rule) pairs that must not contradict on one field
_BOUND_PAIRS = (
  ("minimum", "maximum"),
  ("minimum_length", "maximum_length"),
)


@dataclasses.dataclass
class ValidationReport:
  """Violations collected over one validation pass, in field order.

  Attributes:
    violations: Every violation found, capped per rule and column for frames.
    omitted: Number of frame violations dropped by the `max_reported_rows` cap.
  """

  violations: list[ConstraintViolation] = dataclasses.field(default_factory=list)
  omitted: int = 0

  @property
  def ok(self) -> bool:
    return not self.violations and not self.omitted

  @property
  def messages(self) -> list[str]:
    return [v.message for v in self.violations]

  def for_key(self, key: str) -> list[ConstraintViolation]:
    return [v for v in self.violations if v.key == key]

  def raise_if_invalid(self, where: str | None = None) -> None:
    """Raise ParameterValidationError if anything failed."""
    if not self.ok:
      raise ParameterValidationError(self.violations, where)

  def __len__(self) -> int:
    return len(self.violations)

  def __iter__(self) -> Iterator[ConstraintViolation]:
    return iter(self.violations)


def _check_bounds(key: str, rules: Mapping[str, Any]) -> None:
  """Raise LogicError if a field's lower bound exceeds its upper bound."""
  for low_rule, high_rule in _BOUND_PAIRS:
    low = rules.get(low_rule)
    high = rules.get(high_rule)
    if low is None or high is None:
      continue
    if low > high:
      raise LogicError(
        f"Impossible constraints for '{key}': {low_rule} {low} > {high_rule} {high}"
      )


def _numeric_mismatch(
  validator: Validator, value: Any, index: Hashable | None
) -> ConstraintViolation:
  return validator.violation(
    value,
    message=f"Expected {validator.key} to be numeric, but in fact {value!r}",
    index=index,
  )


def _run(
  validator: Validator, value: Any, index: Hashable | None = None
) -> ConstraintViolation | None:
  """Run one validator on one value, turning strict coercion failures into violations."""
  try:
    result = validator.validate(value)
  except TypeMismatch:
    return _numeric_mismatch(validator, value, index)
  if result:
    return None
  return validator.violation(value, message=result.message, index=index)


class Schema:
  """A compiled field schema.

  The mapping is compiled once into ordered validator lists, one per field:

    ```python
    schema = Schema({
      "age": {"required": True, "type": "integer", "minimum": 18},
      "order": {"only": ["asc", "desc"]},
    })
    report = schema.validate({"age": "17"})
    report.messages  # ["Expected age to be equal or higher than 18, but in fact '17'"]
    ```

  Within a field, validators run by priority. A failed presence or type check
  stops the remaining rules for that field, so a missing value is reported
  once rather than by every rule.
  """

  def __init__(self, fields: Mapping[str, Mapping[str, Any]]) -> None:
    super().__init__()
    if not isinstance(fields, Mapping):
      raise TypeError(f"Schema must be a mapping of fields, got {type(fields).__name__}")
    self.fields = {key: dict(rules) for key, rules in self._checked(fields)}
    self.plan = self._compile()
    logger.debug(f"Compiled schema with {len(self.plan)} fields")

  @staticmethod
  def _checked(
    fields: Mapping[str, Mapping[str, Any]],
  ) -> Iterator[tuple[str, Mapping[str, Any]]]:
    for key, rules in fields.items():
      if not isinstance(rules, Mapping):
        raise TypeError(
          f"Rules for field '{key}' must be a mapping, got {type(rules).__name__}"
        )
      yield key, rules

  def _compile(self) -> dict[str, tuple[Validator, ...]]:
    plan: dict[str, tuple[Validator, ...]] = {}
    for key, rules in self.fields.items():
      validators = [build_validator(name, key, c) for name, c in rules.items()]
      _check_bounds(key, rules)
      # Stable sort keeps declaration order within a priority
      validators.sort(key=lambda v: v.priority)
      plan[key] = tuple(validators)
    return plan

  def keys(self) -> list[str]:
    return list(self.plan)

  def validate(self, params: Mapping[str, Any]) -> ValidationReport:
    """Validate a mapping of parameters (one request).

    Missing keys are absent. Keys not in the schema are ignored.
    """
    report = ValidationReport()
    for key, validators in self.plan.items():
      value = params.get(key)
      for v in validators:
        violation = _run(v, value)
        if violation is None:
          continue
        report.violations.append(violation)
        if v.priority <= Priority.GATE:
          break
    return report

  def validate_frame(self, data: pd.DataFrame) -> ValidationReport:
    """Validate a DataFrame where each row is a record and each column a field.

    A schema field missing from the frame is treated as an all-absent column.
    Violations carry the failing row label in `index`.
    """
    if not isinstance(data, pd.DataFrame):
      raise TypeError(f"validate_frame requires a pandas DataFrame, got {type(data).__name__}")

    report = ValidationReport()
    max_rows = get_config().max_reported_rows
    for key, validators in self.plan.items():
      if key in data.columns:
        column = data[key]
      else:
        column = pd.Series([None] * len(data), index=data.index, dtype=object)

      values = object_values(column)
      # Rows already stopped by a failed presence/type check
      blocked = np.zeros(len(column), dtype=bool)

      for v in validators:
        try:
          candidates = np.logical_not(v.validate_vectorized(column)) & ~blocked
        except TypeMismatch:
          # Strict coercion: find the offending rows one by one
          candidates = ~blocked

        found = 0
        for pos in np.flatnonzero(candidates):
          value = None if is_missing(values[pos]) else values[pos]
          violation = _run(v, value, index=column.index[pos])
          if violation is None:
            candidates[pos] = False
            continue
          found += 1
          if max_rows is None or found <= max_rows:
            report.violations.append(violation)
          else:
            report.omitted += 1

        if v.priority <= Priority.GATE:
          blocked |= candidates

    if report.omitted:
      logger.debug(f"{report.omitted} violations omitted from frame report")
    return report

  def __repr__(self) -> str:
    return f"Schema({self.fields!r})"
