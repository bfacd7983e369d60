"""Template compiler — path-pattern AST to RFC 6570 URI Template.

Walks the tree once, depth-first and left to right::

    /users/:id(.:format)      ->  /users/{id}          (format ignored)
    /users/:id(.:format)      ->  /users/{id}{.format} (ignore=frozenset())
    /files/*path              ->  /files{/path*}

Separators next to a placeholder are folded into the expression
(``{/name}``, ``{.name}``) only when the placeholder sits directly inside an
optional group, so that omitting the value also omits the separator. Outside
a group the separator is part of every URL and stays literal text.

Free-threading safety:
    - The node-type dispatch table is built at import and never mutated
    - Each compile gets its own TemplateCompiler (stack, group depth)
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from chirp_rfc6570.config import DEFAULT_OPTIONS, CompileOptions
from chirp_rfc6570.errors import StructuralError
from chirp_rfc6570.nodes import (
    Cat,
    Dot,
    Group,
    Literal,
    NodeType,
    Or,
    PathNode,
    Slash,
    Star,
    Symbol,
)
from chirp_rfc6570.query import augment

logger = logging.getLogger("chirp_rfc6570.compiler")

# Stack tail when visiting a Cat whose parent is a Group
_CAT_IN_GROUP = [NodeType.GROUP, NodeType.CAT]


class TemplateCompiler:
    """Single-use visitor producing the path portion of a URI template.

    Tracks the types of the nodes currently being visited (the last entry is
    the node in progress) and how many optional groups enclose it.
    """

    __slots__ = ("_group_depth", "_options", "_stack")

    def __init__(self, options: CompileOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS
        self._stack: list[NodeType] = []
        self._group_depth = 0

    def visit(self, node: PathNode) -> str:
        self._stack.append(node.type)
        try:
            return _DISPATCH[node.type](self, node)
        finally:
            self._stack.pop()

    def _placeholder(
        self,
        node: Symbol | Star,
        prefix: str = "",
        suffix: str = "",
        pretext: str = "",
    ) -> str:
        """Render ``{<prefix><name><suffix>}``, or ``""`` if the name is suppressed.

        *pretext* is literal text emitted before the expression; it is
        suppressed together with the placeholder.
        """
        name = node.name
        if not name or name in self._options.ignore:
            return ""
        return f"{pretext}{{{prefix}{name}{suffix}}}"

    def _separated(self, separator: str, node: Symbol) -> str:
        if self._stack[-2:] == _CAT_IN_GROUP:
            return self._placeholder(node, prefix=separator)
        return self._placeholder(node, pretext=separator)

    # -- Node handlers -----------------------------------------------------

    def _visit_terminal(self, node: Literal | Slash | Dot) -> str:
        return node.left

    def _visit_symbol(self, node: Symbol) -> str:
        return self._placeholder(node)

    def _visit_star(self, node: Star) -> str:
        return self.visit(node.left)

    def _visit_or(self, node: Or) -> str:
        # RFC 6570 has no alternation; every branch is emitted in order
        return "".join(self.visit(child) for child in node.children)

    def _visit_group(self, node: Group) -> str:
        if self._group_depth >= 1:
            msg = f"Cannot transform nested groups: {node} sits inside another optional group."
            raise StructuralError(msg)

        self._group_depth += 1
        try:
            return self.visit(node.left)
        finally:
            self._group_depth -= 1

    def _visit_cat(self, node: Cat) -> str:
        match node.left, node.right:
            case Dot() as dot, Symbol() as symbol:
                return self._separated(dot.left, symbol)
            case Slash() as slash, Symbol() as symbol:
                return self._separated(slash.left, symbol)
            case Slash(), Star() as star:
                return self._placeholder(star, "/", "*")
            case Slash(), Cat(left=Star() as star, right=rest):
                return self._placeholder(star, "/", "*") + self.visit(rest)
            case Cat() as head, Star() as star:
                return self.visit(head).rstrip("/") + self._placeholder(star, "/", "*")
            case left, right:
                return self.visit(left) + self.visit(right)


_DISPATCH: Mapping[NodeType, Callable[[TemplateCompiler, Any], str]] = MappingProxyType(
    {
        NodeType.LITERAL: TemplateCompiler._visit_terminal,
        NodeType.SLASH: TemplateCompiler._visit_terminal,
        NodeType.DOT: TemplateCompiler._visit_terminal,
        NodeType.SYMBOL: TemplateCompiler._visit_symbol,
        NodeType.STAR: TemplateCompiler._visit_star,
        NodeType.OR: TemplateCompiler._visit_or,
        NodeType.GROUP: TemplateCompiler._visit_group,
        NodeType.CAT: TemplateCompiler._visit_cat,
    }
)


def compile_path(root: PathNode, options: CompileOptions | None = None) -> str:
    """Compile *root* into the path portion of a URI template.

    Raises ``StructuralError`` if an optional group is nested inside another.
    """
    return TemplateCompiler(options).visit(root)


def accept(
    root: PathNode,
    options: CompileOptions | None = None,
    *,
    action: str | None = None,
) -> str:
    """Compile *root* and append the query expression registered for *action*.

    *action* is a ``"controller#action"`` identifier looked up in
    ``options.params_source``. A missing source, identifier, or
    declaration skips the query expression; it is not an error.
    """
    options = options or DEFAULT_OPTIONS
    template = compile_path(root, options)

    if options.params and options.params_source is not None and action:
        names = options.params_source.names_for(action)
        if names:
            template = augment(template, names)
        else:
            logger.debug("No query parameters declared for %s", action)

    logger.debug("Compiled %s -> %s", root, template)
    return template
