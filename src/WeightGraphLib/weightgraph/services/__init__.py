"""Сервисы построения графа"""

from .graph_builder import GraphBuilder, build_graph

__all__ = ['GraphBuilder', 'build_graph']
