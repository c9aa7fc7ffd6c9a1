"""Дерево кратчайших путей"""

from typing import Dict, Generic, Hashable, List, Optional, TypeVar

V = TypeVar('V', bound=Hashable)
E = TypeVar('E')


class ShortestPathTree(Generic[V, E]):
    """
    Дерево кратчайших путей от одной вершины.

    Используется для восстановления путей после выполнения
    алгоритма Дейкстры. Исток в дерево как цель не входит.
    """

    def __init__(self, source: V, distances: Dict[V, E], parents: Dict[V, V]):
        """
        Инициализация дерева кратчайших путей.

        Args:
            source: Исходная вершина
            distances: Расстояния до достижимых вершин (без истока)
            parents: parents[v] - предыдущая вершина на пути к v
        """
        self._source = source
        self._distances = distances
        self._parents = parents

    @property
    def source(self) -> V:
        return self._source

    def has_path_to(self, v: V) -> bool:
        """
        Проверка существования пути до вершины.

        Args:
            v: Вершина

        Returns:
            True если путь существует
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
        Восстановить путь до вершины.

        Args:
            v: Целевая вершина

        Returns:
            Вершины пути от истока до v или None если пути нет
        """
        if not self.has_path_to(v):
            return None

        path = [v]
        while path[-1] != self._source:
            path.append(self._parents[path[-1]])

        path.reverse()
        return path
