"""Paramwarden - declarative validation of request parameters."""

__version__ = "0.1.0"

# Base classes
from paramwarden.base import Priority, ValidationResult, Validator

# Configuration
from paramwarden.config import Coercion

# Decorator
from paramwarden.decorator import validate

# Exceptions
from paramwarden.exceptions import (
  ConstraintViolation,
  LogicError,
  ParameterValidationError,
  TypeMismatch,
  UnknownConstraintError,
)

# Registry
from paramwarden.registry import REGISTRY, build_validator, register

# Schema engine
from paramwarden.schema import Schema, ValidationReport

# All validators
from paramwarden.validators import (
  Format,
  Maximum,
  MaximumLength,
  Minimum,
  MinimumLength,
  Only,
  Required,
  Type,
  validate_minimum,
)

__all__ = [
  "REGISTRY",
  "Coercion",
  "ConstraintViolation",
  "Format",
  "LogicError",
  "Maximum",
  "MaximumLength",
  "Minimum",
  "MinimumLength",
  "Only",
  "ParameterValidationError",
  "Priority",
  "Required",
  "Schema",
  "Type",
  "TypeMismatch",
  "UnknownConstraintError",
  "ValidationReport",
  "ValidationResult",
  "Validator",
  "__version__",
  "build_validator",
  "register",
  "validate",
  "validate_minimum",
]
