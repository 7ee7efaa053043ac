"""
Workflow results.

Every workflow operation either renders a view (``Ok`` and its recoverable
error variants) or redirects to a canonical path. Missing entities are
raised as NotFoundError instead of being returned.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from inventory.api.schemas.base import FieldError


@dataclass(frozen=True)
class Ok:
    """Render ``view`` with ``data``; ``data`` always carries a ``title``."""

    view: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationFailed(Ok):
    """Form rejected; ``data`` holds the sanitized values for redisplay."""

    errors: list[FieldError] = field(default_factory=list)


@dataclass(frozen=True)
class DependencyConflict(Ok):
    """Delete refused because other entities still reference the target."""

    dependents: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Redirect:
    target: str


Result = Union[Ok, Redirect]
