from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .node import Node, NodeList

log = logging.getLogger(__name__)

NEG_INF = -np.inf
EMPTY_HEAP = '[Empty Heap]'


class EmptyHeap(IndexError):
    pass


class InvalidValue(ValueError):
    pass


class FibHeap():
    """
    Fibonacci Heap

    A forest of min-ordered trees with a cached pointer to the smallest root.
    Nodes are ordered by floating-point values.

    Attributes:
        trees: the top-level list of tree roots
        min_node: the root with the minimum value, None if the heap is empty
        node_count: number of nodes in the heap
        rescan: if True, ``decrease_key`` always rescans the top level for the
            minimum, otherwise only after a cut

    Methods:
        insert(value, payload): add a value, return its node handle
        peek_min(): the minimum value
        extract_min(): remove the minimum node and return its payload
        decrease_key(node, value): lower the value of a node
        delete(node): remove a node
        merge(other): move all nodes of another heap into this one
    """

    def __init__(self, rescan: bool = True):
        self.trees = NodeList()
        self.min_node: Optional[Node] = None
        self.node_count = 0
        self.rescan = rescan

    def count(self) -> int:
        return self.node_count

    def __len__(self):
        return self.node_count

    def is_empty(self) -> bool:
        return self.node_count == 0

    def trees_count(self) -> int:
        """number of top-level trees"""
        return len(self.trees)

    def insert(self, value: float, payload: Any = None) -> Node:
        """
        Add a new top-level tree holding ``value``.

        Args:
            value: the key, any float in (-inf, inf]
            payload: data returned by ``extract_min``

        Returns:
            the new node, usable as a handle for ``decrease_key`` and
            ``delete``
        """
        if value == NEG_INF or np.isnan(value):
            raise InvalidValue(
                f"Cannot insert {value} into the heap ({self.node_count} nodes).")

        node = Node(float(value), payload)
        self.trees.insert(node)
        if self.min_node is None or node.value < self.min_node.value:
            self.min_node = node
        self.node_count += 1
        return node

    def merge(self, other: Optional[FibHeap]):
        """
        Move the trees of ``other`` to the top level of this heap.

        ``other`` is left empty. Merging a heap into itself does nothing.
        """
        if other is None or other is self or other.min_node is None:
            return

        self.trees.merge(other.trees)
        if self.min_node is None or other.min_node.value < self.min_node.value:
            self.min_node = other.min_node
        self.node_count += other.node_count
        log.debug("merged %d nodes, %d nodes in heap", other.node_count,
                  self.node_count)

        other.trees, other.min_node, other.node_count = NodeList(), None, 0

    def peek_min(self) -> float:
        if self.min_node is None:
            raise EmptyHeap("Cannot get the min value of an empty heap.")
        return self.min_node.value

    def extract_min(self) -> Any:
        """
        Remove the node with the lowest value and return its payload.

        The children of the minimum become top-level trees, the top level is
        consolidated and the minimum is searched again.
        """
        node = self.min_node
        if node is None or len(self.trees) == 0:
            raise EmptyHeap(
                "Cannot extract the minimum element of an empty heap.")

        self.trees.remove(node)
        self.node_count -= 1

        for child in node.children:
            child.parent = None
            child.marked = False
        self.trees.merge(node.children)
        node.children = NodeList()

        self._consolidate()
        self._reset_min()
        return node.payload

    def _consolidate(self):
        """
        Link top-level trees of equal degree until every root has a distinct
        degree. The root with the lower value becomes the parent, the root
        being walked wins ties.
        """
        if self.node_count == 0 or self.trees.front is None:
            return

        roots = len(self.trees)
        ranks: dict[int, Node] = {}

        curr = self.trees.front
        while curr is not None:
            degree = curr.degree
            rank = ranks.get(degree)
            if rank is None:
                ranks[degree] = curr
                curr = curr.next
                continue
            if rank is curr:
                curr = curr.next
                continue

            del ranks[degree]
            if curr.value <= rank.value:
                self.trees.remove(rank)
                curr.add_child(rank)
            else:
                self.trees.remove(curr)
                rank.add_child(curr)
                curr = rank

        log.debug("consolidated %d roots into %d trees", roots,
                  len(self.trees))

    def _reset_min(self):
        self.min_node = None
        for node in self.trees:
            if self.min_node is None or node.value < self.min_node.value:
                self.min_node = node

    def decrease_key(self, node: Node, value: float) -> Node:
        """
        Lower the value of ``node``.

        If the new value breaks the heap order with the parent, the node is
        cut to the top level and its marked ancestors follow it.

        Raises:
            InvalidValue: if ``value`` is greater than the current value or
                is the deletion sentinel
        """
        if value == NEG_INF:
            raise InvalidValue(f"Cannot decrease a key to {value}.")
        if np.isnan(value) or value > node.value:
            raise InvalidValue(
                f"New value {value} is greater than current value {node.value}."
            )
        return self._decrease_key(node, value)

    def _decrease_key(self, node: Node, value: float) -> Node:
        node.value = float(value)

        cut = False
        parent = node.parent
        if parent is not None and node.value < parent.value:
            self._cut(node)
            self._cascading_cut(parent)
            cut = True

        if self.rescan or cut:
            self._reset_min()
        elif node.parent is None and node.value < self.min_node.value:
            self.min_node = node
        return node

    def _cut(self, node: Node):
        parent = node.parent
        parent.delete_child(node)
        node.marked = False
        self.trees.insert(node)
        log.debug("cut %s from %s", node.value, parent.value)

    def _cascading_cut(self, node: Node):
        while node.parent is not None:
            if not node.marked:
                node.marked = True
                return
            parent = node.parent
            self._cut(node)
            node = parent

    def delete(self, node: Node) -> Any:
        """
        Remove ``node`` by lowering it below every other value and extracting
        the minimum.
        """
        self._decrease_key(node, NEG_INF)
        return self.extract_min()

    def count_nodes(self) -> int:
        """number of nodes reachable from the top level"""
        count = 0
        stack = list(self.trees)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    def check_heap(self) -> bool:
        return self.count_nodes() == self.node_count

    def __str__(self):
        if len(self.trees) == 0:
            return EMPTY_HEAP
        return str(self.trees)

    def __repr__(self):
        return f'<FibHeap with {self.node_count} nodes>'


def heap_union(a: Optional[FibHeap], b: Optional[FibHeap]) -> FibHeap:
    """
    Union two Fibonacci Heaps

    The heap with more nodes absorbs the other one and is returned.
    """
    if a is None or a.min_node is None:
        return b
    if b is None or b.min_node is None:
        return a
    if b.node_count > a.node_count:
        a, b = b, a
    a.merge(b)
    return a
