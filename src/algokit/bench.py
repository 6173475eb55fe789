"""
Bench: замер времени сортировок

Каждая итерация сортирует свежую копию входа, поэтому все итерации
измеряют одну и ту же работу. Исходные данные не мутируются.

Запуск: `algokit-bench` (или `python -m algokit.bench`).
"""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from algokit.sorting.algorithms import SortAlgorithm, sort_with

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BenchmarkConfig:
    """Конфигурация прогона бенчмарков."""

    size: int = 1000
    iterations: int = 10
    algorithms: tuple[SortAlgorithm, ...] = field(
        default_factory=lambda: tuple(SortAlgorithm)
    )

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")


# =============================================================================
# RESULT
# =============================================================================


class BenchmarkResult(BaseModel):
    """Результат замера одного алгоритма."""

    algorithm: SortAlgorithm
    size: int = Field(..., ge=0, description="Длина входа")
    iterations: int = Field(..., gt=0, description="Число итераций")
    total_seconds: float = Field(..., ge=0, description="Суммарное время (s)")
    mean_seconds: float = Field(..., ge=0, description="Среднее время итерации (s)")
    best_seconds: float = Field(..., ge=0, description="Лучшее время итерации (s)")

    model_config = {"frozen": True}


# =============================================================================
# BENCHMARKS
# =============================================================================


def reverse_sorted(size: int) -> list[int]:
    """
    Худший случай для insertion sort: [size-1, ..., 1, 0].

    Examples:
        >>> reverse_sorted(3)
        [2, 1, 0]
    """
    return list(range(size - 1, -1, -1))


def benchmark_sort(
    data: Sequence[Any],
    algorithm: SortAlgorithm | str,
    iterations: int = 10,
) -> BenchmarkResult:
    """
    Замер времени sort_with на копиях data.

    Args:
        data: Входные данные (не мутируются)
        algorithm: Алгоритм сортировки
        iterations: Число итераций (> 0)

    Returns:
        BenchmarkResult

    Raises:
        ValueError: если iterations <= 0 или algorithm неизвестен
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    selected = SortAlgorithm(algorithm)
    timings: list[float] = []

    for _ in range(iterations):
        arr = list(data)
        start = time.perf_counter()
        sort_with(arr, selected)
        timings.append(time.perf_counter() - start)

    total = sum(timings)
    return BenchmarkResult(
        algorithm=selected,
        size=len(data),
        iterations=iterations,
        total_seconds=total,
        mean_seconds=total / iterations,
        best_seconds=min(timings),
    )


def run_benchmarks(config: BenchmarkConfig | None = None) -> list[BenchmarkResult]:
    """Прогон всех алгоритмов из config на reverse_sorted(config.size)."""
    if config is None:
        config = BenchmarkConfig()

    data = reverse_sorted(config.size)
    results = []
    for algorithm in config.algorithms:
        result = benchmark_sort(data, algorithm, config.iterations)
        logger.info(
            "%s %d: mean=%.6fs best=%.6fs (%d iterations)",
            result.algorithm.value,
            result.size,
            result.mean_seconds,
            result.best_seconds,
            result.iterations,
        )
        results.append(result)
    return results


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_benchmarks()


if __name__ == "__main__":
    main()
