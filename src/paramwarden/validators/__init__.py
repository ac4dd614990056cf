"""Re-export all validators from submodules."""

from paramwarden.validators.length import MaximumLength, MinimumLength
from paramwarden.validators.numeric import Maximum, Minimum, validate_minimum
from paramwarden.validators.value import Format, Only, Required, Type

__all__ = [
  "Format",
  "Maximum",
  "MaximumLength",
  "Minimum",
  "MinimumLength",
  "Only",
  "Required",
  "Type",
  "validate_minimum",
]
