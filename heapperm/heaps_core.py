import logging
from collections.abc import MutableSequence
from typing import Callable, Iterable, Iterator

from heapperm.hptypes import Sink, T, Transposition

logger = logging.getLogger(__name__)


class HeapGenerator(Iterator):
    """Iterative Heap's algorithm over a working sequence.

    The first call to ``advance()`` leaves the sequence untouched; every
    later call performs exactly one swap, so each state differs from the
    previous one by a single transposition. For an odd cursor ``i`` the
    swap is ``control[i] <-> i``, for an even one ``0 <-> i``.
    """

    def __init__(self, elements: Iterable[T], *, inplace: bool = False):
        if inplace:
            if not isinstance(elements, MutableSequence):
                raise TypeError("In-place generation needs a mutable sequence")
            self._work = elements
        else:
            self._work = list(elements)
        self._n = len(self._work)
        self._control = [0] * self._n
        self._cursor = 0
        self._started = False
        self.last_swap: Transposition | None = None

    def __len__(self) -> int:
        return self._n

    def advance(self) -> bool:
        if not self._started:
            self._started = True
            return True
        work, control = self._work, self._control
        while self._cursor < self._n:
            i = self._cursor
            if control[i] < i:
                j = control[i] if i & 1 else 0
                work[j], work[i] = work[i], work[j]
                self.last_swap = (j, i)
                control[i] += 1
                # restart from the shallowest depth after every swap
                self._cursor = 0
                return True
            control[i] = 0
            self._cursor += 1
        return False

    def __next__(self) -> tuple[T, ...]:
        if not self.advance():
            raise StopIteration
        return tuple(self._work)


def _hpwrap(
    func: Callable[[Iterable[T]], HeapGenerator],
    elements: Iterable[T],
):
    try:
        iter(elements)
    except (TypeError, ValueError):
        raise TypeError("Elements must be iterable")
    return func(elements)


def hperms(elements: Iterable[T]) -> HeapGenerator:
    return _hpwrap(HeapGenerator, elements)


def generate(seq: MutableSequence[T], emit: Sink[T]) -> int:
    """Permute ``seq`` in place, calling ``emit(seq)`` after every state.

    Emits ``len(seq)!`` times (once for an empty sequence) and returns the
    number of emissions. ``seq`` is left in whatever order the last swap
    produced.
    """
    gen = HeapGenerator(seq, inplace=True)
    logger.debug("generating permutations of %d elements", len(gen))
    count = 0
    while gen.advance():
        emit(seq)
        count += 1
    logger.debug("emitted %d permutations", count)
    return count


def _swaps(gen: HeapGenerator) -> Iterator[Transposition]:
    gen.advance()
    while gen.advance():
        yield gen.last_swap


def transpositions(n: int) -> Iterator[Transposition]:
    if n < 0:
        raise ValueError(f"Length must be non-negative, got {n}")
    return _swaps(HeapGenerator(range(n)))
