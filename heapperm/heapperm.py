from typing import Collection

from heapperm.heaps_core import HeapGenerator


def heappermute(elements: Collection) -> tuple[tuple, ...]:
    try:
        elements = tuple(elements)
    except (TypeError, ValueError):
        raise TypeError("Argument must be castable to tuple")
    return tuple(HeapGenerator(elements))
