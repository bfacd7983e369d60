"""Route definitions and route sets that publish URI templates.

A ``Route`` binds a parsed path pattern to the action that serves it.
A ``RouteSet`` collects routes and renders a template for each one::

    registry = ParamsRegistry()
    registry.declare("users", index=["page", "per_page"])

    routes = RouteSet()
    routes.add(Route(spec=users_pattern, name="users", controller="users", action="index"))

    options = CompileOptions(params_source=registry)
    routes.rfc6570_route("users", options)   # UriTemplate('/users{?page,per_page}')
"""

from dataclasses import dataclass

from chirp_rfc6570.compiler import accept
from chirp_rfc6570.config import CompileOptions
from chirp_rfc6570.errors import ConfigurationError, RouteNotFound
from chirp_rfc6570.nodes import PathNode
from chirp_rfc6570.params import action_identifier


@dataclass(frozen=True, slots=True)
class UriTemplate:
    """A compiled RFC 6570 template, handed to whatever expands it."""

    pattern: str

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``spec`` is the parsed path pattern; ``controller`` and ``action``
    identify the handler whose query parameters are appended.
    """

    spec: PathNode
    name: str | None = None
    controller: str = ""
    action: str = ""

    @property
    def identifier(self) -> str | None:
        """``"controller#action"``, or ``None`` when either part is missing."""
        return action_identifier(self.controller, self.action)

    def to_rfc6570(self, options: CompileOptions | None = None) -> UriTemplate:
        return UriTemplate(accept(self.spec, options, action=self.identifier))


class RouteSet:
    """Ordered collection of routes with name lookup."""

    __slots__ = ("_named", "_routes")

    def __init__(self, routes: list[Route] | None = None) -> None:
        self._routes: list[Route] = []
        self._named: dict[str, Route] = {}
        for route in routes or ():
            self.add(route)

    def add(self, route: Route) -> None:
        """Add *route*. Names must be unique within the set."""
        if route.name is not None:
            if route.name in self._named:
                msg = f"Duplicate route name {route.name!r}: {self._named[route.name].spec} and {route.spec}"
                raise ConfigurationError(msg)
            self._named[route.name] = route
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """All routes in registration order."""
        return list(self._routes)

    @property
    def names(self) -> list[str]:
        return list(self._named)

    def get(self, name: str) -> Route | None:
        """Look up a route by name. Returns ``None`` if not found."""
        return self._named.get(name)

    def to_rfc6570(self, options: CompileOptions | None = None) -> list[UriTemplate]:
        """Templates for every route, in registration order."""
        return [route.to_rfc6570(options) for route in self._routes]

    def named_to_rfc6570(self, options: CompileOptions | None = None) -> dict[str, UriTemplate]:
        """Templates for named routes, keyed by route name."""
        return {name: route.to_rfc6570(options) for name, route in self._named.items()}

    def rfc6570_route(self, name: str, options: CompileOptions | None = None) -> UriTemplate:
        """Template for the route called *name*.

        Raises ``RouteNotFound`` if no route has that name.
        """
        route = self._named.get(name)
        if route is None:
            raise RouteNotFound(name)
        return route.to_rfc6570(options)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._named
