from treelib import Node, Tree

from .heap import FibHeap


def heap_view(heap: FibHeap) -> Tree:
    """
    Build a ``treelib.Tree`` of the heap forest.

    Every top-level tree hangs below a synthetic ``root`` node. Node tags are
    the values with two decimals, identifiers are the ids of the heap nodes.

    Examples:
        >>> heap = FibHeap()
        >>> for v in [3, 1, 2]:
        ...     _ = heap.insert(v)
        >>> heap_view(heap).size()
        4
    """
    ret = Tree()
    ret.add_node(Node(tag='root', identifier='root'))

    stack = [(node, 'root') for node in heap.trees]
    while stack:
        node, parent = stack.pop()
        ret.add_node(Node(tag=f'{node.value:.2f}', identifier=id(node)),
                     parent=parent)
        stack.extend((child, id(node)) for child in node.children)
    return ret
