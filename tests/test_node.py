from fibheap.node import EMPTY_LIST, Node, NodeList


def make_list(*values):
    nl = NodeList()
    nodes = [Node(v) for v in values]
    for n in nodes:
        nl.insert(n)
    return nl, nodes


def test_empty():
    nl = NodeList()
    assert len(nl) == 0
    assert nl.front is None
    assert nl.back is None
    assert list(nl) == []
    assert str(nl) == EMPTY_LIST


def test_insert():
    nl, (a, b, c) = make_list(10.0, 20.0, 30.0)
    assert len(nl) == 3
    assert nl.front is a
    assert nl.back is c
    assert a.next is b and b.next is c and c.next is None
    assert list(nl) == [a, b, c]
    assert str(nl) == '(10.00), (20.00), (30.00)'


def test_remove():
    nl, (a, b, c, d) = make_list(10.0, 20.0, 30.0, 40.0)

    assert nl.remove(b) is b
    assert list(nl) == [a, c, d]
    assert b.next is None

    assert nl.remove(a) is a
    assert nl.front is c
    assert list(nl) == [c, d]

    assert nl.remove(d) is d
    assert nl.back is c
    assert c.next is None

    assert nl.remove(c) is c
    assert len(nl) == 0
    assert nl.front is None and nl.back is None

    assert nl.remove(c) is None
    assert nl.remove(None) is None


def test_remove_then_insert():
    nl, (a, b, c) = make_list(10.0, 20.0, 30.0)
    nl.remove(c)
    nl.insert(c)
    nl.remove(a)
    nl.insert(a)
    assert list(nl) == [b, c, a]
    assert nl.front is b and nl.back is a


def test_merge():
    nl, (a, b) = make_list(1.0, 2.0)
    other, (c, d) = make_list(3.0, 4.0)
    nl.merge(other)
    assert len(nl) == 4
    assert list(nl) == [a, b, c, d]
    assert nl.back is d

    nl.remove(c)
    assert list(nl) == [a, b, d]
    nl.remove(b)
    assert list(nl) == [a, d]


def test_merge_empty():
    nl, (a, ) = make_list(1.0)
    nl.merge(NodeList())
    nl.merge(None)
    assert list(nl) == [a]

    empty = NodeList()
    empty.merge(nl)
    assert list(empty) == [a]
    assert empty.front is a and empty.back is a
    assert len(empty) == 1


def test_merge_single():
    nl, (a, b) = make_list(1.0, 2.0)
    other, (c, ) = make_list(3.0)
    nl.merge(other)
    assert list(nl) == [a, b, c]
    nl.remove(c)
    assert nl.back is b
    assert list(nl) == [a, b]


def test_children():
    parent = Node(1.0, 'p')
    assert parent.is_root()
    assert parent.degree == 0

    a, b = Node(2.0), Node(3.0)
    parent.add_child(a)
    parent.add_child(b)
    assert parent.degree == 2
    assert a.parent is parent and not a.is_root()
    assert str(parent) == '(1.00: (2.00), (3.00))'

    parent.delete_child(a)
    assert a.parent is None
    assert parent.degree == 1
    assert str(parent) == '(1.00: (3.00))'


def test_relink_between_lists():
    nl, (a, b, c) = make_list(10.0, 20.0, 30.0)
    nl.remove(a)
    c.add_child(a)
    assert list(nl) == [b, c]
    assert str(nl) == '(20.00), (30.00: (10.00))'

    d = Node(40.0)
    nl.insert(d)
    d.add_child(nl.remove(b))
    assert str(nl) == '(30.00: (10.00)), (40.00: (20.00))'


def test_str_nested():
    root = Node(1.0)
    child = Node(2.0)
    child.add_child(Node(3.0))
    root.add_child(child)
    root.add_child(Node(4.5))
    assert str(root) == '(1.00: (2.00: (3.00)), (4.50))'
