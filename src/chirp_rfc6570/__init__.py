"""chirp-rfc6570 — RFC 6570 URI Templates for route patterns.

Compiles parsed route patterns into URI templates that clients can expand,
optionally advertising the query parameters each action accepts.

Basic usage::

    from chirp_rfc6570 import CompileOptions, ParamsRegistry, compile_path
    from chirp_rfc6570.nodes import Dot, Group, Literal, Slash, Symbol, cat

    spec = cat(Slash(), Literal("users"), Slash(), Symbol(":id"), Group(cat(Dot(), Symbol(":format"))))
    compile_path(spec)                                   # "/users/{id}"
    compile_path(spec, CompileOptions(ignore=frozenset()))  # "/users/{id}{.format}"

Route sets::

    registry = ParamsRegistry()
    registry.declare("users", show=["fields"])

    routes = RouteSet([Route(spec, name="user", controller="users", action="show")])
    routes.rfc6570_route("user", CompileOptions(params_source=registry))
    # UriTemplate(pattern='/users/{id}{?fields}')
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "CompileOptions",
    "ConfigurationError",
    "ParamsRegistry",
    "RFC6570Error",
    "Route",
    "RouteNotFound",
    "RouteSet",
    "StructuralError",
    "TemplateCompiler",
    "UriTemplate",
    "accept",
    "augment",
    "compile_path",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CompileOptions": "chirp_rfc6570.config",
    "ConfigurationError": "chirp_rfc6570.errors",
    "ParamsRegistry": "chirp_rfc6570.params",
    "RFC6570Error": "chirp_rfc6570.errors",
    "Route": "chirp_rfc6570.routes",
    "RouteNotFound": "chirp_rfc6570.errors",
    "RouteSet": "chirp_rfc6570.routes",
    "StructuralError": "chirp_rfc6570.errors",
    "TemplateCompiler": "chirp_rfc6570.compiler",
    "UriTemplate": "chirp_rfc6570.routes",
    "accept": "chirp_rfc6570.compiler",
    "augment": "chirp_rfc6570.query",
    "compile_path": "chirp_rfc6570.compiler",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import chirp_rfc6570`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
