"""Ребро неориентированного взвешенного графа"""

from typing import Generic, TypeVar


E = TypeVar('E')


class Edge(Generic[E]):
    """
    Неориентированное ребро графа.

    Концы ребра (v1 и v2) - индексы вершин в хранилище графа,
    value - вес ребра произвольного типа.
    """

    __slots__ = ('v1', 'v2', 'value')

    def __init__(self, v1: int, v2: int, value: E):
        self.v1 = v1        # Первая вершина
        self.v2 = v2        # Вторая вершина
        self.value = value  # Вес ребра

    def touches(self, vertex: int) -> bool:
        """Инцидентна ли вершина ребру"""
        return vertex == self.v1 or vertex == self.v2

    def other(self, vertex: int) -> int:
        """
        Получить другую вершину ребра.

        Args:
            vertex: Одна из вершин ребра

        Returns:
            Другая вершина (для петли - та же самая)
        """
        if vertex == self.v1:
            return self.v2
        elif vertex == self.v2:
            return self.v1
        else:
            raise ValueError(f"Вершина {vertex} не принадлежит ребру")

    def connects(self, a: int, b: int) -> bool:
        """Соединяет ли ребро вершины a и b (в любом направлении)"""
        return (self.v1 == a and self.v2 == b) or (self.v1 == b and self.v2 == a)

    def __repr__(self):
        return f"Edge({self.v1} -- {self.v2}, value={self.value!r})"
