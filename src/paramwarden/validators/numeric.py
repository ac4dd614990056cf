"""Numeric bound validators: minimum and maximum."""

from __future__ import annotations

import numbers
import operator
from typing import TYPE_CHECKING, Any, override

import numpy as np

from paramwarden.base import Priority, ValidationResult, Validator
from paramwarden.coercion import coerce_series, to_float
from paramwarden.utils import missing_mask

if TYPE_CHECKING:
  from collections.abc import Callable

  import pandas as pd

  from paramwarden.config import Coercion


class _BoundValidator(Validator):
  """Base class for numeric bound validators (minimum, maximum).

  The value is coerced to float before comparison, the message shows the
  original value.
  """

  priority = Priority.VALUE

  # Subclasses must define these
  op_func: Callable[[Any, Any], Any]  # pyright: ignore[reportUninitializedInstanceVariable]
  relation: str = ""

  def __init__(
    self,
    key: str,
    constraint: float,
    *,
    coercion: Coercion | str | None = None,
  ) -> None:
    if isinstance(constraint, bool) or not isinstance(constraint, numbers.Real):
      raise TypeError(
        f"{self.rule} constraint must be a real number, got {type(constraint).__name__}"
      )
    super().__init__(key, constraint)
    self.coercion = coercion

  @override
  def is_valid(self, value: Any) -> bool:
    return bool(self.op_func(to_float(value, self.coercion), self.constraint))

  @override
  def expectation(self) -> str:
    return f"to be {self.relation} {self.constraint}"

  @override
  def validate_vectorized(self, data: pd.Series) -> np.ndarray:
    coerced = coerce_series(data, self.coercion)
    with np.errstate(invalid="ignore"):
      mask = np.asarray(self.op_func(coerced, self.constraint), dtype=bool)
    mask[missing_mask(data)] = True
    return mask


class Minimum(_BoundValidator):
  """Validator that a field value is >= constraint (inclusive).

  Absent values pass; presence is the job of `Required`.

  Examples:
    ```python
    Minimum("age", 18).validate(18)    # passes
    Minimum("age", 18).validate(17.9)  # fails
    Minimum("age", 18).validate(None)  # passes
    ```
  """

  rule = "minimum"
  op_func = operator.ge
  relation = "equal or higher than"


class Maximum(_BoundValidator):
  """Validator that a field value is <= constraint (inclusive)."""

  rule = "maximum"
  op_func = operator.le
  relation = "equal or less than"


def validate_minimum(
  value: Any,
  key: str,
  constraint: float,
  *,
  coercion: Coercion | str | None = None,
) -> ValidationResult:
  """Validate one value against a minimum bound without keeping a validator around."""
  return Minimum(key, constraint, coercion=coercion).validate(value)
