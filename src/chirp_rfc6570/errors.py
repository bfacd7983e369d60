"""chirp-rfc6570 exception hierarchy.

Shared across the compiler, the parameter registry, and route sets so every
module raises and catches the same types.
"""


class RFC6570Error(Exception):
    """Base for all chirp-rfc6570 errors."""


class StructuralError(RFC6570Error):
    """Raised when a path pattern cannot be expressed as a URI template.

    The only structural failure is an optional group nested inside another
    optional group. The whole compile is aborted; no partial template is
    returned.
    """


class ConfigurationError(RFC6570Error):
    """Raised when a declaration is invalid.

    Typically surfaces at setup time: malformed query-parameter names or
    duplicate route names.
    """


class RouteNotFound(RFC6570Error, KeyError):  # noqa: N818 — mirrors KeyError lookups
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No named route for {name!r}.")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
