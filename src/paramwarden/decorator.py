"""The @validate decorator for validating function arguments against a schema."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any

from loguru import logger

from paramwarden.config import get_config
from paramwarden.exceptions import ParameterValidationError
from paramwarden.schema import Schema

if TYPE_CHECKING:
  from collections.abc import Callable, Mapping


def _control_flag(
  kwargs: dict[str, Any],
  name: str,
  declared: bool,
  default: bool | None,
  fallback: bool,
) -> bool:
  """Resolve skip_validation / warn_only for one call.

  The flag is removed from kwargs unless the wrapped function declares it.
  """
  if name in kwargs:
    return bool(kwargs[name] if declared else kwargs.pop(name))
  if default is not None:
    return default
  return fallback


def validate[**P, R](
  schema: Schema | Mapping[str, Mapping[str, Any]],
  *,
  skip_validation_by_default: bool | None = None,
  warn_only_by_default: bool | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R | None]]:
  """Decorator to validate function arguments against a field schema.

  Each schema field names a parameter of the decorated function; values are
  taken from the bound call arguments with defaults applied. Fields collected
  by ``**kwargs`` are validated as well.

  Example:
    ```python
    @validate({"age": {"type": "integer", "minimum": 18}})
    def register_user(name: str, age: int | None = None): ...

    register_user("x", age=17)  # raises ParameterValidationError
    ```

  Control keywords:
    `skip_validation` and `warn_only` are accepted at call time and removed
    from kwargs unless they appear in the function signature.

  Args:
    schema: A compiled Schema or a mapping to compile.
    skip_validation_by_default: If True, `skip_validation` defaults to True.
      If None, defaults to the global configuration `skip_validation`.
    warn_only_by_default: If True, `warn_only` defaults to True. When `warn_only` is
      True, validation failures log an error and return None instead of raising.
      If None, defaults to the global configuration `warn_only`.

  Returns:
    A decorator applying the validation.
  """
  compiled = schema if isinstance(schema, Schema) else Schema(schema)

  def decorator(func: Callable[P, R]) -> Callable[P, R | None]:
    sig = inspect.signature(func)
    parameters = sig.parameters
    var_keyword = next(
      (p.name for p in parameters.values() if p.kind is inspect.Parameter.VAR_KEYWORD),
      None,
    )
    if var_keyword is None:
      unknown = [key for key in compiled.keys() if key not in parameters]
      if unknown:
        raise TypeError(
          f"Schema fields {unknown} are not parameters of '{func.__name__}'"
        )

    declares_skip = "skip_validation" in parameters
    declares_warn = "warn_only" in parameters

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
      config = get_config()
      skip_val = _control_flag(
        kwargs,
        "skip_validation",
        declares_skip,
        skip_validation_by_default,
        config.skip_validation,
      )
      warn_only = _control_flag(
        kwargs, "warn_only", declares_warn, warn_only_by_default, config.warn_only
      )
      if skip_val:
        return func(*args, **kwargs)

      bound = sig.bind(*args, **kwargs)
      bound.apply_defaults()
      arguments = dict(bound.arguments)
      if var_keyword is not None:
        arguments.update(arguments.pop(var_keyword, {}))

      report = compiled.validate(arguments)
      if not report.ok:
        if warn_only:
          for violation in report:
            logger.error(
              f"Validation failed for parameter '{violation.key}' in '{func.__name__}' "
              f"({violation.rule}): {violation.message}"
            )
          return None
        raise ParameterValidationError(report.violations, func.__name__)

      return func(*args, **kwargs)

    return wrapper

  return decorator
