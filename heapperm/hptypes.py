from collections.abc import MutableSequence
from typing import Callable, TypeAlias, TypeVar

T = TypeVar('T')

# (j, i) with j < i: the positions exchanged by one step
Transposition: TypeAlias = tuple[int, int]

# receives the live working sequence; copy it to keep it
Sink: TypeAlias = Callable[[MutableSequence[T]], object]
