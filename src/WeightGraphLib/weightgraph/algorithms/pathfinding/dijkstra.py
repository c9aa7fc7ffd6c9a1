"""Алгоритм Дейкстры для поиска кратчайших путей"""

import heapq
import itertools
import logging
from typing import Dict, Generic, Hashable, List, Optional, Set, TypeVar

from ..graph.graph import Graph
from ..graph.parallel_edge_policy import ParallelEdgePolicy
from ..graph.shortest_path_tree import ShortestPathTree

logger = logging.getLogger(__name__)

V = TypeVar('V', bound=Hashable)
E = TypeVar('E')


class Dijkstra(Generic[V, E]):
    """
    Алгоритм Дейкстры для поиска кратчайших путей
    от одной вершины до всех остальных.

    Тип веса E должен поддерживать сравнение (<) и сложение (+).
    Нулевой и бесконечный веса алгоритму неизвестны, поэтому
    исток в очередь не попадает, а предварительные расстояния
    задаются сразу весами ребер, выходящих из истока. Вершина без
    предварительного расстояния просто отсутствует в словаре.
    Отрицательные веса не поддерживаются и не проверяются.
    """

    def __init__(self, graph: Graph[V, E], source: V):
        """
        Инициализация и выполнение алгоритма Дейкстры.

        Args:
            graph: Граф
            source: Начальная вершина (может отсутствовать в графе)
        """
        self._graph = graph
        self._source = source

        self._distances: Dict[V, E] = {}
        self._parents: Dict[V, V] = {}

        # Выполнить алгоритм
        self._search()

    def _search(self):
        """Выполнить поиск кратчайших путей"""
        unvisited: Set[V] = set()
        counter = itertools.count()
        # Priority queue: (distance, seq, vertex); seq не дает сравнивать вершины
        pq = []

        for vertex in self._graph.vertices:
            if vertex == self._source:
                continue

            unvisited.add(vertex)

            # Среди параллельных ребер от истока берется самое легкое
            weight = self._graph.weight_between(
                self._source, vertex, policy=ParallelEdgePolicy.MIN
            )
            if weight is not None:
                self._distances[vertex] = weight
                self._parents[vertex] = self._source
                heapq.heappush(pq, (weight, next(counter), vertex))

        settled = 0
        while pq:
            dist, _, u = heapq.heappop(pq)

            # Устаревшая запись: вершина уже закреплена
            if u not in unvisited:
                continue

            unvisited.remove(u)
            settled += 1

            # Релаксация всех соседей
            for w, edge_value in self._graph.neighbors(u):
                if w not in unvisited:
                    continue

                new_distance = dist + edge_value
                prev_distance = self._distances.get(w)

                if prev_distance is None or new_distance < prev_distance:
                    self._distances[w] = new_distance
                    self._parents[w] = u
                    heapq.heappush(pq, (new_distance, next(counter), w))

        self._distances.pop(self._source, None)

        logger.debug(
            f"Dijkstra from {self._source!r}: settled {settled}, "
            f"unreachable {len(unvisited)}"
        )

    @property
    def source(self) -> V:
        return self._source

    @property
    def distances(self) -> Dict[V, E]:
        """Расстояния до достижимых вершин (без истока)"""
        return dict(self._distances)

    @property
    def tree(self) -> ShortestPathTree[V, E]:
        """Дерево кратчайших путей"""
        return ShortestPathTree(self._source, dict(self._distances), dict(self._parents))

    def has_path_to(self, v: V) -> bool:
        """
        Проверка существования пути до вершины.

        Args:
            v: Вершина

        Returns:
            True если путь существует (для истока - False)
        """
        return v in self._distances

    def distance_to(self, v: V) -> Optional[E]:
        """
        Получить расстояние до вершины.

        Args:
            v: Вершина

        Returns:
            Расстояние или None если вершина недостижима
        """
        return self._distances.get(v)

    def get_path(self, v: V) -> Optional[List[V]]:
        """
        Восстановить кратчайший путь до вершины.

        Args:
            v: Целевая вершина

        Returns:
            Вершины пути от истока до v или None если пути нет
        """
        return self.tree.get_path(v)


def shortest_paths(graph: Graph[V, E], source: V) -> Dict[V, E]:
    """
    Кратчайшие расстояния от source до всех достижимых вершин.

    Args:
        graph: Граф
        source: Начальная вершина

    Returns:
        Словарь вершина -> расстояние. Исток и недостижимые
        вершины в словарь не входят
    """
    return Dijkstra(graph, source).distances
