"""Shared base classes for md2typ options.

Options are frozen dataclasses. Each field carries ``metadata`` with a help
string and an importance level ("core" or "advanced") so that command-line
flags and documentation can be derived from the class itself.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2typ.constants import DEFAULT_FAIL_ON_RESOURCE_ERRORS


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Adds ``create_updated`` to frozen option classes."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with ``kwargs`` applied; ``__post_init__`` validation runs again.

        Examples
        --------
            >>> TypstRendererOptions().create_updated(heading_offset=0).heading_offset
            0

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options common to every renderer.

    Parameters
    ----------
    fail_on_resource_errors : bool, default=False
        Raise TemplateRenderError when a table or figure template fails.
        When False the failure is logged at WARNING and a placeholder is
        written in its place.

    """

    fail_on_resource_errors: bool = field(
        default=DEFAULT_FAIL_ON_RESOURCE_ERRORS,
        metadata={
            "help": "Fail on table/figure template errors instead of emitting placeholders",
            "importance": "advanced",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Options common to every parser; subclasses add their own fields."""

    def __post_init__(self) -> None:
        pass
