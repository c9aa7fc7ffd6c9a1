"""Ошибки графа"""

from typing import Any


class UnknownVertexError(ValueError):
    """
    Попытка соединить вершину, которой нет в графе.

    Вызывающий код сам решает, добавить ли недостающую вершину
    и повторить соединение или прервать построение.
    """

    def __init__(self, vertex: Any):
        self.vertex = vertex
        super().__init__(f"Вершина {vertex!r} отсутствует в графе")
