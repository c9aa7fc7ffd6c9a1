"""Базовые структуры графа"""

from .edge import Edge
from .graph import Graph
from .parallel_edge_policy import ParallelEdgePolicy
from .shortest_path_tree import ShortestPathTree

__all__ = ['Edge', 'Graph', 'ParallelEdgePolicy', 'ShortestPathTree']
