"""Query-parameter registry — allowed query names per controller action.

Actions are identified by ``"controller#action"`` strings. Owners declare
their names during setup; the compiler only reads them::

    registry = ParamsRegistry()
    registry.declare("users", index=["page", "per_page"])

    @registry.params("users#search", "q", "page")
    def search(request): ...

    registry.names_for("users#index")  # ("page", "per_page")
"""

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, TypeVar

from chirp_rfc6570.errors import ConfigurationError

logger = logging.getLogger("chirp_rfc6570.params")

F = TypeVar("F", bound=Callable[..., object])

# Characters that would break out of a "{?a,b}" expression
_INVALID_NAME_RE = re.compile(r"[{},\s]")


class ParamsSource(Protocol):
    """Anything that maps an action identifier to its query-parameter names."""

    def names_for(self, identifier: str) -> Sequence[str] | None: ...


def action_identifier(controller: str | None, action: str | None) -> str | None:
    """Build the ``"controller#action"`` key, or ``None`` if either part is empty."""
    if not controller or not action:
        return None
    return f"{controller}#{action}"


def _normalize(identifier: str, names: Iterable[str]) -> tuple[str, ...]:
    """Validate *names* and drop duplicates, keeping first-seen order."""
    if isinstance(names, str):
        names = (names,)
    result: list[str] = []
    for name in names:
        if not isinstance(name, str) or not name:
            msg = f"Query parameter names for {identifier!r} must be non-empty strings, got {name!r}"
            raise ConfigurationError(msg)
        if _INVALID_NAME_RE.search(name):
            msg = (
                f"Invalid query parameter name {name!r} for {identifier!r}: "
                "braces, commas, and whitespace are not allowed."
            )
            raise ConfigurationError(msg)
        result.append(name)
    return tuple(dict.fromkeys(result))


class ParamsRegistry:
    """In-process ``ParamsSource``. Mutated during setup, read at compile time."""

    __slots__ = ("_defs",)

    def __init__(self) -> None:
        self._defs: dict[str, tuple[str, ...]] = {}

    def declare(self, controller: str, **defs: Iterable[str]) -> None:
        """Merge per-action parameter names for *controller*.

        Each keyword is an action name; its value lists the allowed query
        names in template order. Redeclaring an action replaces its names.
        """
        if not controller:
            msg = "declare() needs a controller name"
            raise ConfigurationError(msg)
        for action, names in defs.items():
            self._set(f"{controller}#{action}", names)

    def params(self, identifier: str, *names: str) -> Callable[[F], F]:
        """Decorator form of ``declare`` for a single action.

        The decorated handler is returned unchanged.
        """
        controller, sep, action = identifier.partition("#")
        if not sep or not controller or not action:
            msg = f"Expected 'controller#action', got {identifier!r}"
            raise ConfigurationError(msg)

        def decorator(func: F) -> F:
            self._set(identifier, names)
            return func

        return decorator

    def _set(self, identifier: str, names: Iterable[str]) -> None:
        normalized = _normalize(identifier, names)
        if identifier in self._defs:
            logger.warning(
                "Query parameters for %s redeclared: %s -> %s",
                identifier,
                self._defs[identifier],
                normalized,
            )
        self._defs[identifier] = normalized

    def names_for(self, identifier: str) -> tuple[str, ...] | None:
        """Look up the names for *identifier*. Returns ``None`` if undeclared."""
        return self._defs.get(identifier)

    def __len__(self) -> int:
        return len(self._defs)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._defs
