"""Tests for chirp_rfc6570.routes — Route, RouteSet, and UriTemplate."""

import pytest

from chirp_rfc6570.config import CompileOptions
from chirp_rfc6570.errors import ConfigurationError, RouteNotFound
from chirp_rfc6570.nodes import Dot, Group, Literal, Slash, Star, Symbol, cat
from chirp_rfc6570.params import ParamsRegistry
from chirp_rfc6570.routes import Route, RouteSet, UriTemplate

USERS = cat(Slash(), Literal("users"))
USER = cat(Slash(), Literal("users"), Slash(), Symbol(":id"), Group(cat(Dot(), Symbol(":format"))))
FILES = cat(Slash(), Literal("files"), Slash(), Star(Symbol("*path")))


@pytest.fixture
def registry() -> ParamsRegistry:
    registry = ParamsRegistry()
    registry.declare("users", index=["page", "per_page"])
    registry.declare("files", show=["page", "per_page"])
    return registry


@pytest.fixture
def route_set() -> RouteSet:
    return RouteSet(
        [
            Route(USERS, name="users", controller="users", action="index"),
            Route(USER, name="user", controller="users", action="show"),
            Route(FILES, name="file", controller="files", action="show"),
            Route(cat(Slash(), Literal("health"))),
        ]
    )


class TestUriTemplate:
    def test_str(self) -> None:
        assert str(UriTemplate("/users/{id}")) == "/users/{id}"

    def test_equality(self) -> None:
        assert UriTemplate("/a") == UriTemplate("/a")


class TestRoute:
    def test_identifier(self) -> None:
        assert Route(USERS, controller="users", action="index").identifier == "users#index"

    def test_identifier_missing(self) -> None:
        assert Route(USERS).identifier is None

    def test_to_rfc6570_without_params(self) -> None:
        assert Route(USER).to_rfc6570() == UriTemplate("/users/{id}")

    def test_to_rfc6570_with_params(self, registry: ParamsRegistry) -> None:
        route = Route(FILES, controller="files", action="show")
        options = CompileOptions(params_source=registry)
        assert route.to_rfc6570(options).pattern == "/files{/path*}{?page,per_page}"


class TestRouteSet:
    def test_routes_in_order(self, route_set: RouteSet) -> None:
        assert [r.name for r in route_set.routes] == ["users", "user", "file", None]
        assert len(route_set) == 4

    def test_names(self, route_set: RouteSet) -> None:
        assert route_set.names == ["users", "user", "file"]
        assert "user" in route_set
        assert route_set.get("missing") is None

    def test_duplicate_name(self, route_set: RouteSet) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate route name 'users'"):
            route_set.add(Route(USERS, name="users"))

    def test_unnamed_routes_allowed_twice(self) -> None:
        route_set = RouteSet()
        route_set.add(Route(USERS))
        route_set.add(Route(USERS))
        assert len(route_set) == 2

    def test_to_rfc6570(self, route_set: RouteSet, registry: ParamsRegistry) -> None:
        templates = route_set.to_rfc6570(CompileOptions(params_source=registry))
        assert [t.pattern for t in templates] == [
            "/users{?page,per_page}",
            "/users/{id}",
            "/files{/path*}{?page,per_page}",
            "/health",
        ]

    def test_named_to_rfc6570(self, route_set: RouteSet) -> None:
        templates = route_set.named_to_rfc6570(CompileOptions(ignore=frozenset()))
        assert templates == {
            "users": UriTemplate("/users"),
            "user": UriTemplate("/users/{id}{.format}"),
            "file": UriTemplate("/files{/path*}"),
        }

    def test_rfc6570_route(self, route_set: RouteSet, registry: ParamsRegistry) -> None:
        template = route_set.rfc6570_route("users", CompileOptions(params_source=registry))
        assert template.pattern == "/users{?page,per_page}"

    def test_rfc6570_route_missing(self, route_set: RouteSet) -> None:
        with pytest.raises(RouteNotFound) as exc_info:
            route_set.rfc6570_route("missing")
        assert str(exc_info.value) == "No named route for 'missing'."
        assert exc_info.value.name == "missing"

    def test_rfc6570_route_missing_is_key_error(self, route_set: RouteSet) -> None:
        with pytest.raises(KeyError):
            route_set.rfc6570_route("missing")
