from fibheap import FibHeap, heap_view


def test_heap_view_empty():
    tree = heap_view(FibHeap())
    assert tree.size() == 1
    assert tree.root == 'root'


def test_heap_view():
    heap = FibHeap()
    heap.insert(0.0)
    nodes = [heap.insert(float(v)) for v in range(1, 5)]
    heap.extract_min()
    heap.insert(9.5)

    tree = heap_view(heap)
    assert tree.size() == heap.count() + 1
    roots = tree.children('root')
    assert sorted(n.tag for n in roots) == ['1.00', '9.50']

    children = tree.children(id(nodes[0]))
    assert sorted(n.tag for n in children) == ['2.00', '3.00']
    assert [n.tag for n in tree.children(id(nodes[2]))] == ['4.00']
    assert tree.depth() == 3
