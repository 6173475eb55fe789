"""
algokit: учебная библиотека алгоритмов.

Содержит два независимых компонента без внешних зависимостей друг от друга:
- algokit.sorting: in-place сортировки (insertion sort, merge sort)
- algokit.matrix:  умножение квадратных матриц (naive, divide and conquer)

Вспомогательно:
- algokit.bench: замер времени сортировок на клонированных входах
"""

__version__ = "0.1.0"
