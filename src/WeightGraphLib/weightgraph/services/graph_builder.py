"""Построитель графа из декларативного описания"""

import logging
from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

from ..algorithms.graph.graph import Graph
from ..algorithms.graph.parallel_edge_policy import ParallelEdgePolicy

logger = logging.getLogger(__name__)

# (вершина, [(вес, сосед), ...])
VertexSpec = Tuple[Any, Sequence[Tuple[Any, Any]]]
GraphSpec = Union[Mapping[Any, Sequence[Tuple[Any, Any]]], Iterable[VertexSpec]]


class GraphBuilder:
    """
    Построитель графа из списка смежности.

    Граф строится в два прохода:
    - сначала регистрируются все вершины
    - затем создаются ребра в порядке описания

    Пример описания:
        [
            ("A", [(6, "B"), (5, "C")]),
            ("B", [(3, "C")]),
            ("C", []),
        ]
    """

    def __init__(
        self,
        strict: bool = False,
        parallel_edge_policy: Union[ParallelEdgePolicy, str, None] = None
    ):
        """
        Args:
            strict: Регистрировать только вершины из левой части описания.
                    Тогда ребро к необъявленной вершине вызывает
                    UnknownVertexError
            parallel_edge_policy: Политика параллельных ребер для графа
        """
        self.strict = strict
        self.parallel_edge_policy = parallel_edge_policy

    def build(self, spec: GraphSpec) -> Graph:
        """
        Построить граф из описания.

        Args:
            spec: Последовательность пар (вершина, [(вес, сосед), ...])
                  или словарь с той же структурой

        Returns:
            Заполненный граф

        Raises:
            UnknownVertexError: В строгом режиме, если сосед не объявлен
        """
        entries = self._normalize(spec)
        graph = Graph(parallel_edge_policy=self.parallel_edge_policy)

        for vertex, _ in entries:
            graph.add_vertex(vertex)

        if not self.strict:
            for _, links in entries:
                for _, target in links:
                    graph.add_vertex(target)

        for vertex, links in entries:
            for weight, target in links:
                graph.connect(vertex, target, weight)

        logger.info(f"Built graph with {graph.v} vertices and {graph.e} edges")
        return graph

    @staticmethod
    def _normalize(spec: GraphSpec) -> List[Tuple[Any, List[Tuple[Any, Any]]]]:
        """Привести описание к списку (вершина, список ребер)"""
        items = spec.items() if isinstance(spec, Mapping) else spec
        return [(vertex, list(links)) for vertex, links in items]


def build_graph(spec: GraphSpec, strict: bool = False, **kwargs) -> Graph:
    """
    Построить граф за один вызов.

    Args:
        spec: Описание графа (см. GraphBuilder)
        strict: Строгий режим регистрации вершин
        **kwargs: Дополнительные параметры GraphBuilder

    Returns:
        Заполненный граф
    """
    return GraphBuilder(strict=strict, **kwargs).build(spec)
