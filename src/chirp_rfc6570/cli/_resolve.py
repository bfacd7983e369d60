"""Route set resolution — resolves ``"module:attribute"`` strings to RouteSets.

Used by ``chirp-rfc6570 routes`` to locate the routes a user wants printed.
"""

import importlib

from chirp_rfc6570.params import ParamsSource
from chirp_rfc6570.routes import RouteSet


def resolve_routes(import_string: str) -> RouteSet:
    """Resolve an import string to a ``RouteSet``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp.urls"`` resolves to
    ``myapp.urls.routes``).

    Supports factory functions: if the resolved object is callable and
    not a RouteSet, it will be called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``RouteSet`` or callable.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, RouteSet):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, RouteSet):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteSet"
        raise TypeError(msg)

    return obj


def resolve_params_source(import_string: str) -> ParamsSource | None:
    """Find the query-parameter registry that lives beside a route set.

    Looks for a module-level ``params`` attribute exposing ``names_for``.
    Returns ``None`` when the module declares none.
    """
    module_path, _, _ = import_string.partition(":")
    module = importlib.import_module(module_path)
    source = getattr(module, "params", None)
    if source is None or not callable(getattr(source, "names_for", None)):
        return None
    return source
