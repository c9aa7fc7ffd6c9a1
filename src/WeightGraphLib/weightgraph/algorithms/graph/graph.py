"""Взвешенный неориентированный граф"""

import logging
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar, Union

from ... import config
from ...errors import UnknownVertexError
from .edge import Edge
from .parallel_edge_policy import ParallelEdgePolicy

logger = logging.getLogger(__name__)

V = TypeVar('V', bound=Hashable)
E = TypeVar('E')


class Graph(Generic[V, E]):
    """
    Взвешенный неориентированный граф с произвольными типами вершин и весов.

    Вершины хранятся в списке (арене) и уникальны по равенству,
    ребра ссылаются на них по индексу. Смежность определяется
    линейным просмотром списка ребер в порядке добавления.
    Параллельные ребра между одной парой вершин допускаются.
    """

    def __init__(
        self,
        parallel_edge_policy: Union[ParallelEdgePolicy, str, None] = None
    ):
        """
        Инициализация пустого графа.

        Args:
            parallel_edge_policy: Какое из параллельных ребер возвращает
                                  weight_between. Если None - берется
                                  из config.PARALLEL_EDGE_POLICY
        """
        self._vertices: List[V] = []       # Арена вершин
        self._index: Dict[V, int] = {}     # Вершина -> индекс в арене
        self._edges: List[Edge[E]] = []    # Ребра в порядке добавления
        self._policy = ParallelEdgePolicy.parse(
            parallel_edge_policy
            if parallel_edge_policy is not None
            else config.PARALLEL_EDGE_POLICY
        )

    @classmethod
    def empty(cls, **kwargs) -> "Graph[V, E]":
        """Создать граф без вершин и ребер"""
        return cls(**kwargs)

    @property
    def v(self) -> int:
        """Количество вершин"""
        return len(self._vertices)

    @property
    def e(self) -> int:
        """Количество ребер"""
        return len(self._edges)

    @property
    def vertices(self) -> List[V]:
        """Вершины в порядке добавления"""
        return list(self._vertices)

    @property
    def parallel_edge_policy(self) -> ParallelEdgePolicy:
        return self._policy

    def add_vertex(self, vertex: V):
        """
        Добавить вершину. Повторное добавление ничего не меняет.

        Args:
            vertex: Значение вершины
        """
        if vertex not in self._index:
            self._index[vertex] = len(self._vertices)
            self._vertices.append(vertex)

    def contains(self, vertex: V) -> bool:
        """
        Проверка наличия вершины в графе.

        Args:
            vertex: Значение вершины

        Returns:
            True если вершина добавлена в граф
        """
        return vertex in self._index

    def index_of(self, vertex: V) -> Optional[int]:
        """Индекс вершины в арене или None"""
        return self._index.get(vertex)

    def vertex_at(self, index: int) -> V:
        """Вершина по индексу в арене"""
        return self._vertices[index]

    def connect(self, v1: V, v2: V, weight: E):
        """
        Соединить две вершины ребром.

        Дубликаты не отсеиваются: повторный вызов для той же пары
        создает параллельное ребро.

        Args:
            v1: Первая вершина
            v2: Вторая вершина
            weight: Вес ребра

        Raises:
            UnknownVertexError: Если хотя бы одной из вершин нет в графе
        """
        for vertex in (v1, v2):
            if not self.contains(vertex):
                logger.warning(f"Cannot connect {v1!r} and {v2!r}: unknown vertex {vertex!r}")
                raise UnknownVertexError(vertex)

        self._edges.append(Edge(self._index[v1], self._index[v2], weight))
        logger.debug(f"Connected {v1!r} -- {v2!r} (weight={weight!r})")

    def neighbors(self, vertex: V) -> List[Tuple[V, E]]:
        """
        Получить соседей вершины.

        Args:
            vertex: Значение вершины (может отсутствовать в графе)

        Returns:
            Пары (сосед, вес ребра) для каждого ребра, инцидентного
            вершине, в порядке добавления ребер
        """
        index = self._index.get(vertex)
        if index is None:
            return []

        return [
            (self._vertices[edge.other(index)], edge.value)
            for edge in self._edges
            if edge.touches(index)
        ]

    def weight_between(
        self,
        v1: V,
        v2: V,
        policy: Union[ParallelEdgePolicy, str, None] = None
    ) -> Optional[E]:
        """
        Получить вес ребра между двумя вершинами (в любом направлении).

        Args:
            v1: Первая вершина
            v2: Вторая вершина
            policy: Выбор среди параллельных ребер (по умолчанию -
                    политика графа). MIN требует сравнения весов через <

        Returns:
            Вес ребра или None если вершины не соединены
        """
        a = self._index.get(v1)
        b = self._index.get(v2)
        if a is None or b is None:
            return None

        policy = self._policy if policy is None else ParallelEdgePolicy.parse(policy)

        best: Optional[Edge[E]] = None
        for edge in self._edges:
            if not edge.connects(a, b):
                continue

            if policy is ParallelEdgePolicy.FIRST:
                return edge.value

            if best is None or edge.value < best.value:
                best = edge

        return best.value if best is not None else None

    def edges(self) -> List[Tuple[V, V, E]]:
        """
        Получить все ребра графа.

        Returns:
            Тройки (v1, v2, вес) в порядке добавления
        """
        return [
            (self._vertices[edge.v1], self._vertices[edge.v2], edge.value)
            for edge in self._edges
        ]

    def shortest_paths(self, source: V) -> Dict[V, E]:
        """
        Кратчайшие расстояния от source до всех достижимых вершин.

        См. weightgraph.algorithms.pathfinding.dijkstra.shortest_paths
        """
        from ..pathfinding.dijkstra import shortest_paths
        return shortest_paths(self, source)

    def __contains__(self, vertex) -> bool:
        return self.contains(vertex)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self):
        return f"Graph(v={self.v}, e={self.e}, policy={self._policy.value})"
