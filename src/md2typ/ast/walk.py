#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/ast/walk.py
"""Depth-first enter/exit traversal and tree search helpers."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from md2typ.ast.nodes import Node, TableCell, get_node_children
from md2typ.ast.visitors import NodeVisitor


class WalkStatus(Enum):
    """Instruction returned by a visitor to steer :func:`walk`.

    Attributes
    ----------
    GO_TO_NEXT
        Continue normally: descend into children, then visit on exit
    SKIP_CHILDREN
        Do not walk the node's children and do not visit it on exit
    TERMINATE
        Stop the entire walk immediately

    """

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


def walk(node: Node, visitor: NodeVisitor) -> WalkStatus:
    """Walk ``node`` depth-first, visiting each node on entry and on exit.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk
    visitor : NodeVisitor
        Visitor whose ``visit(node, entering)`` is called for every node

    Returns
    -------
    WalkStatus
        TERMINATE if a visitor stopped the walk, otherwise GO_TO_NEXT

    Notes
    -----
    A visit result of None is treated as GO_TO_NEXT. A node whose entering
    visit returns SKIP_CHILDREN is not visited again on exit.

    """
    status = visitor.visit(node, True) or WalkStatus.GO_TO_NEXT
    if status is WalkStatus.TERMINATE:
        return status
    if status is WalkStatus.SKIP_CHILDREN:
        return WalkStatus.GO_TO_NEXT

    for child in get_node_children(node):
        if walk(child, visitor) is WalkStatus.TERMINATE:
            return WalkStatus.TERMINATE

    status = visitor.visit(node, False) or WalkStatus.GO_TO_NEXT
    if status is WalkStatus.TERMINATE:
        return status
    return WalkStatus.GO_TO_NEXT


def find_first(node: Node, predicate: Callable[[Node], bool]) -> Optional[Node]:
    """Return the first node in pre-order that satisfies ``predicate``.

    The search starts with ``node`` itself and stops at the first match.

    Parameters
    ----------
    node : Node
        Root of the subtree to search
    predicate : callable
        Function taking a node and returning True for a match

    Returns
    -------
    Node or None
        The first matching node, or None if nothing matches

    """
    if predicate(node):
        return node
    for child in get_node_children(node):
        found = find_first(child, predicate)
        if found is not None:
            return found
    return None


def count_cells(node: Node) -> int:
    """Count TableCell nodes below ``node`` without descending into cells."""
    if isinstance(node, TableCell):
        return 1
    return sum(count_cells(child) for child in get_node_children(node))
