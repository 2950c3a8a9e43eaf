from heapperm.hptypes import Sink, T, Transposition
from heapperm.heaps_core import (
    HeapGenerator, generate, hperms, transpositions
)
from heapperm.heapperm import heappermute
from heapperm._config import get_log_level, set_log_level
