"""Numeric coercion of loosely typed field values.

Request parameters usually arrive as strings, so numeric rules have to read
them as numbers before comparing. Two policies exist:

- permissive: numbers convert directly, strings are read by their longest
  leading decimal prefix (``"12abc"`` -> 12.0) and anything unreadable
  becomes 0.0. This never raises.
- strict: only real numbers and fully numeric strings are accepted, anything
  else raises `TypeMismatch`.
"""

from __future__ import annotations

import decimal
import math
import numbers
import re
from typing import Any

import numpy as np
import pandas as pd

from paramwarden.config import Coercion, get_config
from paramwarden.exceptions import TypeMismatch
from paramwarden.utils import is_numeric, missing_mask, object_values

_DIGITS = r"\d+(?:_\d+)*"
_NUMERIC_PREFIX = re.compile(
  rf"\s*[+-]?(?:{_DIGITS}(?:\.{_DIGITS})?|\.{_DIGITS})(?:[eE][+-]?{_DIGITS})?"
)
# Plain decimal notation only: no inf/nan spellings, no digit-group underscores
_DECIMAL_STRING = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_decimal_string(text: str) -> bool:
  """Check if a string spells a number in plain decimal notation (e.g. "-1.5e3")."""
  return _DECIMAL_STRING.fullmatch(text.strip()) is not None


def _resolve(policy: Coercion | str | None) -> Coercion:
  if policy is None:
    return get_config().coercion
  return Coercion(policy)


def _real_to_float(value: numbers.Real | decimal.Decimal) -> float:
  """Convert a real number, saturating to +/-inf when it is out of float range."""
  try:
    return float(value)
  except OverflowError:
    return math.inf if value > 0 else -math.inf


def _permissive(value: Any) -> float:
  if isinstance(value, (bool, np.bool_)):
    return float(value)
  if isinstance(value, decimal.Decimal) and value.is_snan():
    return math.nan
  if isinstance(value, (numbers.Real, decimal.Decimal)):
    return _real_to_float(value)
  if isinstance(value, str):
    match = _NUMERIC_PREFIX.match(value)
    return float(match.group()) if match else 0.0
  return 0.0


def _strict(value: Any) -> float:
  if isinstance(value, (bool, np.bool_)):
    raise TypeMismatch(f"Expected a number, got bool {value!r}")
  if isinstance(value, decimal.Decimal) and value.is_snan():
    raise TypeMismatch(f"Expected a number, got signaling NaN {value!r}")
  if isinstance(value, (numbers.Real, decimal.Decimal)):
    return _real_to_float(value)
  if isinstance(value, str):
    if not is_decimal_string(value):
      raise TypeMismatch(f"Expected a numeric string, got {value!r}")
    return float(value)
  raise TypeMismatch(f"Expected a number, got {type(value).__name__}")


def to_float(value: Any, policy: Coercion | str | None = None) -> float:
  """Coerce a single present value to float.

  Args:
    value: The value to coerce. Callers handle absent values themselves.
    policy: Coercion policy, defaults to the global configuration.

  Raises:
    TypeMismatch: Under the strict policy, if the value is not numeric.
  """
  if _resolve(policy) is Coercion.STRICT:
    return _strict(value)
  return _permissive(value)


def coerce_series(data: pd.Series, policy: Coercion | str | None = None) -> np.ndarray:
  """Coerce a Series to a float array, leaving absent entries as NaN.

  Numeric dtypes take a fast path without per-element work.
  """
  if is_numeric(data):
    return data.to_numpy(dtype=float, na_value=np.nan)

  resolved = _resolve(policy)
  values = object_values(data)
  out = np.full(len(values), np.nan)
  for pos in np.flatnonzero(np.logical_not(missing_mask(data))):
    out[pos] = to_float(values[pos], resolved)
  return out
