#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for converter and cleaner options."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2md.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


def validate_choice(name: str, value: Any, choices: Iterable[Any]) -> None:
    """Raise ValidationError when ``value`` is not one of ``choices``."""
    allowed = tuple(choices)
    if value not in allowed:
        raise ValidationError(
            f"{name} must be one of {', '.join(repr(c) for c in allowed)}, got {value!r}",
            parameter_name=name,
            parameter_value=value,
        )
