from __future__ import annotations

from typing import Any, Iterator, Optional

EMPTY_LIST = '(Empty list)'


class Node():
    """
    A heap element.

    Attributes:
        value: key used to order the node in the heap
        payload: user data carried alongside the key
        children: list of child subtrees owned by this node
        parent: the node whose children list holds this node, None for roots
        marked: True if the node has lost a child since it became a child
        next: the following sibling in the list that holds this node
    """
    __slots__ = ('value', 'payload', 'children', 'parent', 'marked', 'next',
                 '_prev')

    def __init__(self,
                 value: float,
                 payload: Any = None,
                 parent: Optional[Node] = None):
        self.value, self.payload, self.parent = value, payload, parent
        self.children = NodeList()
        self.marked = False
        self.next: Optional[Node] = None
        self._prev: Optional[Node] = None

    @property
    def degree(self) -> int:
        return len(self.children)

    def is_root(self) -> bool:
        return self.parent is None

    def add_child(self, node: Node):
        node.parent = self
        node.next, node._prev = None, None
        self.children.insert(node)

    def delete_child(self, node: Node):
        node.parent = None
        self.children.remove(node)

    def __str__(self):
        if len(self.children) == 0:
            return f'({self.value:.2f})'
        return f'({self.value:.2f}: {self.children})'

    def __repr__(self):
        return f'Node({self.value!r}, {self.payload!r})'


class NodeList():
    """
    Linked list of sibling nodes.

    Only forward traversal through ``Node.next`` is public. The backward link
    lives in ``Node._prev`` and is touched by this class alone, so removing a
    member does not need to scan from the front.
    """
    __slots__ = ('_front', '_back', '_length')

    def __init__(self):
        self._front: Optional[Node] = None
        self._back: Optional[Node] = None
        self._length = 0

    @property
    def front(self) -> Optional[Node]:
        return self._front

    @property
    def back(self) -> Optional[Node]:
        return self._back

    def __len__(self):
        return self._length

    def __iter__(self) -> Iterator[Node]:
        node = self._front
        while node is not None:
            # a node may be relinked elsewhere while the caller holds it
            nxt = node.next
            yield node
            node = nxt

    def insert(self, node: Node):
        if self._front is None:
            node.next, node._prev = None, None
            self._front = self._back = node
            self._length = 1
            return

        node._prev, node.next = self._back, None
        self._back.next = node
        self._back = node
        self._length += 1

    def merge(self, other: Optional[NodeList]):
        """
        Append all nodes of ``other`` to the back of this list.

        This is an unsorted splice. ``other`` is consumed and must not be used
        afterwards.
        """
        if other is None or other._front is None or other._length == 0:
            return

        if self._front is None:
            self._front, self._back = other._front, other._back
            self._length = other._length
            return

        self._back.next = other._front
        other._front._prev = self._back
        self._back = other._back
        self._length += other._length

    def remove(self, node: Optional[Node]) -> Optional[Node]:
        """
        Unlink ``node`` and return it.

        ``node`` must be a member of this list. Returns None when the list is
        empty or ``node`` is None.
        """
        if node is None or self._length == 0:
            return None

        if node._prev is None:
            if self._front is node:
                self._front = node.next
        else:
            node._prev.next = node.next

        if node.next is None:
            if self._back is node:
                self._back = node._prev
        else:
            node.next._prev = node._prev

        node.next, node._prev = None, None
        self._length -= 1
        return node

    def __str__(self):
        if self._front is None:
            return EMPTY_LIST
        return ', '.join(str(node) for node in self)
