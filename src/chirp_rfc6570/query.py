"""Query expansion — appends ``{?a,b,c}`` to a compiled path template."""

from collections.abc import Sequence


def augment(template: str, names: Sequence[str]) -> str:
    """Append a form-style query expression for *names* to *template*.

    Names are used as given: the registry owns validation and ordering.

    Examples::

        >>> augment("/users/{id}", ["page", "per_page"])
        '/users/{id}{?page,per_page}'
        >>> augment("/users/{id}", [])
        '/users/{id}'
    """
    if not names:
        return template
    return f"{template}{{?{','.join(names)}}}"
