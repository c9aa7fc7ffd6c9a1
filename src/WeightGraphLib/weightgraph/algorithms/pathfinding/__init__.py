"""Алгоритмы поиска кратчайших путей"""

from .dijkstra import Dijkstra, shortest_paths

__all__ = ['Dijkstra', 'shortest_paths']
