from .heap import (EMPTY_HEAP, NEG_INF, EmptyHeap, FibHeap, InvalidValue,
                   heap_union)
from .node import Node, NodeList
from .version import __version__
from .view import heap_view
