"""Utility functions for paramwarden."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

# Fast numeric type detection constants (bool and complex are excluded on purpose)
NUMERIC_KINDS = frozenset("iuf")


def is_numeric(data: pd.Series) -> bool:
  """Check if a Series holds real numbers using a fast dtype kind check."""
  return data.dtype.kind in NUMERIC_KINDS


def is_missing(value: Any) -> bool:
  """Check if a single cell taken from a pandas object counts as absent.

  None, NaN, NaT and pd.NA are absent. Containers are never absent, even when
  empty, since pd.isna would otherwise answer element-wise.
  """
  if value is None:
    return True
  if not pd.api.types.is_scalar(value):
    return False
  return bool(pd.isna(value))


def missing_mask(data: pd.Series) -> np.ndarray:
  """Return a boolean array marking absent entries of a Series."""
  return np.asarray(pd.isna(data), dtype=bool)


def object_values(data: pd.Series) -> np.ndarray:
  """Return Series values as plain Python objects (for messages and row checks)."""
  return data.to_numpy(dtype=object)
