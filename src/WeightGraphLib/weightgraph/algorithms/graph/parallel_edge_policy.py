"""Выбор веса среди параллельных ребер"""

from enum import Enum


class ParallelEdgePolicy(Enum):
    """Какое из параллельных ребер видно через weight_between"""

    FIRST = "first"  # Первое добавленное ребро
    MIN = "min"      # Ребро с минимальным весом

    @classmethod
    def parse(cls, value) -> "ParallelEdgePolicy":
        """
        Получить политику по значению из конфигурации.

        Args:
            value: Политика или ее строковое имя ("first", "min")

        Returns:
            Политика выбора ребра
        """
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Неизвестная политика параллельных ребер: {value!r} "
                f"(допустимо: {allowed})"
            ) from None
