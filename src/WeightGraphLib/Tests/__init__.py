"""
Пакет тестов для weightgraph.

Структура:
- test_graph_store.py - вершины, ребра, запросы к графу
- test_graph_algorithms.py - алгоритм Дейкстры
- test_services.py - построение графа из описания
- test_config.py - конфигурация и логирование

Запуск:
    pytest src/WeightGraphLib/Tests/ -v
    pytest src/WeightGraphLib/Tests/ -m "not stochastic"
"""
