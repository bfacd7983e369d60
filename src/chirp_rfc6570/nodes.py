"""Path-pattern AST — the input to the template compiler.

Route parsers produce these trees from patterns like ``/users/:id(.:format)``.
Every node is a frozen dataclass: trees are immutable, hashable, and safe to
share between threads.

Concatenation is right-recursive, the shape route parsers emit::

    /users/:id  ->  Cat(Slash(), Cat(Literal("users"), Cat(Slash(), Symbol(":id"))))

``cat()`` builds that shape from a flat sequence of nodes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class NodeType(Enum):
    """Kind tag for every path node."""

    LITERAL = "literal"
    SLASH = "slash"
    DOT = "dot"
    SYMBOL = "symbol"
    STAR = "star"
    CAT = "cat"
    OR = "or"
    GROUP = "group"


# Decoration characters a symbol may carry (":id", "*path").
_DECORATION = str.maketrans("", "", "*:")


@dataclass(frozen=True, slots=True)
class Literal:
    """Fixed text segment."""

    left: str

    @property
    def type(self) -> NodeType:
        return NodeType.LITERAL

    def __str__(self) -> str:
        return self.left


@dataclass(frozen=True, slots=True)
class Slash:
    """``/`` separator. The wrapped child is the separator token itself."""

    left: str = "/"

    @property
    def type(self) -> NodeType:
        return NodeType.SLASH

    def __str__(self) -> str:
        return self.left


@dataclass(frozen=True, slots=True)
class Dot:
    """``.`` separator. The wrapped child is the separator token itself."""

    left: str = "."

    @property
    def type(self) -> NodeType:
        return NodeType.DOT

    def __str__(self) -> str:
        return self.left


@dataclass(frozen=True, slots=True)
class Symbol:
    """Named placeholder such as ``:id`` or ``*path``."""

    left: str

    @property
    def type(self) -> NodeType:
        return NodeType.SYMBOL

    @property
    def name(self) -> str:
        """The placeholder name with ``*`` and ``:`` stripped."""
        return self.left.translate(_DECORATION)

    def __str__(self) -> str:
        return self.left


@dataclass(frozen=True, slots=True)
class Star:
    """Greedy splat placeholder wrapping a ``Symbol``."""

    left: Symbol

    @property
    def type(self) -> NodeType:
        return NodeType.STAR

    @property
    def name(self) -> str:
        return self.left.name

    def __str__(self) -> str:
        text = str(self.left)
        return text if text.startswith("*") else f"*{text}"


@dataclass(frozen=True, slots=True)
class Cat:
    """Ordered concatenation: ``left`` is emitted before ``right``."""

    left: "PathNode"
    right: "PathNode"

    @property
    def type(self) -> NodeType:
        return NodeType.CAT

    def __str__(self) -> str:
        return f"{self.left}{self.right}"


@dataclass(frozen=True, slots=True)
class Or:
    """Ordered alternatives."""

    children: tuple["PathNode", ...] = ()

    @property
    def type(self) -> NodeType:
        return NodeType.OR

    def __str__(self) -> str:
        return "|".join(str(c) for c in self.children)


@dataclass(frozen=True, slots=True)
class Group:
    """Optional sub-pattern, written ``(...)`` in route syntax."""

    left: "PathNode"

    @property
    def type(self) -> NodeType:
        return NodeType.GROUP

    def __str__(self) -> str:
        return f"({self.left})"


PathNode: TypeAlias = Literal | Slash | Dot | Symbol | Star | Cat | Or | Group


def cat(*nodes: PathNode) -> PathNode:
    """Fold *nodes* into a right-recursive ``Cat`` chain.

    ``cat(a)`` is ``a``; ``cat(a, b, c)`` is ``Cat(a, Cat(b, c))``.

    Raises ``ValueError`` when called without nodes.
    """
    if not nodes:
        msg = "cat() needs at least one node"
        raise ValueError(msg)

    result = nodes[-1]
    for node in reversed(nodes[:-1]):
        result = Cat(node, result)
    return result
