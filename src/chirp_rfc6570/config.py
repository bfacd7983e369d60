"""Compile configuration.

CompileOptions is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from chirp_rfc6570.params import ParamsSource


@dataclass(frozen=True, slots=True)
class CompileOptions:
    """Options for one template compile. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        options = CompileOptions(ignore=frozenset(), params_source=registry)
    """

    # Placeholder names suppressed from the template entirely
    ignore: frozenset[str] = frozenset({"format"})

    # Query expansion — appended only when a source is configured
    params: bool = True
    params_source: ParamsSource | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of names (lists from CLI flags, sets from callers)
        if not isinstance(self.ignore, frozenset):
            object.__setattr__(self, "ignore", frozenset(self.ignore))

    def with_overrides(self, **changes: Any) -> CompileOptions:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = CompileOptions()
