"""
Конфигурация pytest и общие фикстуры для всех тестов.

Этот файл автоматически загружается pytest перед запуском тестов.
"""

import pytest
import sys
from pathlib import Path

# Добавляем путь к модулю weightgraph в sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from weightgraph.algorithms.graph.graph import Graph  # noqa: E402


# ==================== Маркеры тестов ====================

def pytest_configure(config):
    """Регистрация пользовательских маркеров"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "stochastic: marks tests that use randomness"
    )


def pytest_collection_modifyitems(config, items):
    """Модификация собранных тестов"""
    # Автоматически добавляем маркер "unit" к тестам без других маркеров
    for item in items:
        if not any(mark.name in ["integration", "slow", "stochastic"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# ==================== Общие фикстуры ====================

EXAMPLE_EDGES = [
    ("A", "B", 6),
    ("A", "C", 5),
    ("B", "C", 3),
    ("B", "D", 4),
    ("C", "D", 3),
    ("C", "E", 7),
    ("C", "F", 10),
    ("D", "E", 5),
    ("E", "F", 4),
]


@pytest.fixture
def example_edges():
    """Ребра эталонного графа A..F"""
    return list(EXAMPLE_EDGES)


@pytest.fixture
def example_graph(example_edges):
    """
    Эталонный граф.

    Ребра:
        A-B=6, A-C=5, B-C=3, B-D=4, C-D=3,
        C-E=7, C-F=10, D-E=5, E-F=4
    """
    graph = Graph[str, int]()
    for v in "ABCDEF":
        graph.add_vertex(v)
    for v1, v2, w in example_edges:
        graph.connect(v1, v2, w)
    return graph


@pytest.fixture
def empty_graph():
    """Пустой граф"""
    return Graph()


@pytest.fixture
def disconnected_graph():
    """Граф с несвязными компонентами и изолированной вершиной"""
    graph = Graph[int, int]()
    for v in range(7):
        graph.add_vertex(v)
    # Компонента 1: 0-1-2
    graph.connect(0, 1, 5)
    graph.connect(1, 2, 3)
    # Компонента 2: 3-4-5
    graph.connect(3, 4, 2)
    graph.connect(4, 5, 4)
    # 6 - изолированная вершина
    return graph


# ==================== Настройки для случайных тестов ====================

@pytest.fixture
def seed_random():
    """Фиксация seed для воспроизводимости случайных тестов"""
    import random
    random.seed(42)
    yield
    # Восстановление случайности после теста
    random.seed()
