"""Модуль алгоритмов - граф и поиск путей"""

from . import graph
from . import pathfinding

__all__ = ['graph', 'pathfinding']
