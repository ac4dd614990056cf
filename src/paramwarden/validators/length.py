"""Length validators: minimum_length and maximum_length."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, override

from paramwarden.base import Priority, Validator

if TYPE_CHECKING:
  from collections.abc import Callable


def _length(value: Any) -> int:
  """Length of a sized value, or of its string form otherwise."""
  try:
    return len(value)
  except TypeError:
    return len(str(value))


class _LengthValidator(Validator):
  priority = Priority.VALUE

  op_func: Callable[[int, int], bool]  # pyright: ignore[reportUninitializedInstanceVariable]
  relation: str = ""

  def __init__(self, key: str, constraint: int) -> None:
    if isinstance(constraint, bool) or not isinstance(constraint, int) or constraint < 0:
      raise ValueError(
        f"{self.rule} constraint must be a non-negative integer, got {constraint!r}"
      )
    super().__init__(key, constraint)

  @override
  def is_valid(self, value: Any) -> bool:
    return self.op_func(_length(value), self.constraint)

  @override
  def expectation(self) -> str:
    return f"to be {self.relation} {self.constraint} characters"


class MinimumLength(_LengthValidator):
  """Validator that a field value has at least `constraint` characters (or items)."""

  rule = "minimum_length"
  op_func = operator.ge
  relation = "longer than or equal to"


class MaximumLength(_LengthValidator):
  """Validator that a field value has at most `constraint` characters (or items)."""

  rule = "maximum_length"
  op_func = operator.le
  relation = "shorter than or equal to"
