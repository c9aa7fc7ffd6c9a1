"""
weightgraph - неориентированный взвешенный граф с произвольным типом веса
и поиском кратчайших путей алгоритмом Дейкстры.
"""

from .errors import UnknownVertexError
from .algorithms.graph import Edge, Graph, ParallelEdgePolicy, ShortestPathTree
from .algorithms.pathfinding import Dijkstra, shortest_paths
from .services import GraphBuilder, build_graph

__version__ = "1.0.0"

__all__ = [
    'Graph',
    'Edge',
    'ParallelEdgePolicy',
    'ShortestPathTree',
    'Dijkstra',
    'shortest_paths',
    'GraphBuilder',
    'build_graph',
    'UnknownVertexError',
]
