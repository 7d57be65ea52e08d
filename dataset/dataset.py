import random
from typing import Iterable, List, Optional

from dataset.markers import Marker


# ---------------------------------------------------------------------------
# Dataset
# ---------------------------------------------------------------------------
class Dataset:
    """
    The array being sorted plus its per-index markers and operation counters.

    Attributes:
        values      : The mutable list of integers.  Length never changes.
        markers     : One Marker per index (read-only view, see below).
        comparisons : Number of count_comparison() calls since the last reset.
        swaps       : Number of swap() calls since the last reset.
        writes      : Number of write() calls since the last reset (merge sort).

    Markers come from two layers:
        transient – COMPARING / SWAPPING, wiped by every mark_* call
        sorted    – sticky flags, only cleared by reset_markers()
    A transient mark wins for the step it was set in; afterwards the index
    falls back to SORTED or DEFAULT.

    Mutation happens only through swap() and write().
    """

    __slots__ = ("values", "comparisons", "swaps", "writes", "_transient", "_sorted")

    def __init__(self, values: Iterable[int] = ()):
        self.values: List[int]        = list(values)
        self.comparisons: int         = 0
        self.swaps: int               = 0
        self.writes: int              = 0
        self._transient: List[Marker] = [Marker.DEFAULT] * len(self.values)
        self._sorted: List[bool]      = [False] * len(self.values)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def generate_random(
        cls,
        size: int = 100,
        low: int = 50,
        high: int = 600,
        seed: Optional[int] = None,
    ) -> "Dataset":
        """Uniform random integers in [low, high], both ends inclusive."""
        if size < 0:
            raise ValueError(f"Dataset size must be >= 0, got {size}")
        rng = random.Random(seed)
        return cls(rng.randint(low, high) for _ in range(size))

    def copy(self) -> "Dataset":
        """Fresh dataset with the same values, default markers and zero counters."""
        return Dataset(self.values)

    # ------------------------------------------------------------------
    # Mutation primitives
    # ------------------------------------------------------------------
    def swap(self, i: int, j: int) -> None:
        self.values[i], self.values[j] = self.values[j], self.values[i]
        self.swaps += 1

    def write(self, k: int, value: int) -> None:
        self.values[k] = value
        self.writes += 1

    def count_comparison(self) -> None:
        self.comparisons += 1

    def reset_counters(self) -> None:
        self.comparisons = 0
        self.swaps       = 0
        self.writes      = 0

    # ------------------------------------------------------------------
    # Markers
    # ------------------------------------------------------------------
    @property
    def markers(self) -> List[Marker]:
        return [
            t if t is not Marker.DEFAULT else (Marker.SORTED if s else Marker.DEFAULT)
            for t, s in zip(self._transient, self._sorted)
        ]

    def clear_markers(self) -> None:
        """Drop every transient marker; SORTED marks stay."""
        self._transient = [Marker.DEFAULT] * len(self.values)

    def reset_markers(self) -> None:
        """Drop every marker, SORTED included.  Used when a run restarts."""
        self._transient = [Marker.DEFAULT] * len(self.values)
        self._sorted    = [False] * len(self.values)

    def mark_compare(self, i: int, j: int) -> None:
        self.clear_markers()
        self._transient[i] = Marker.COMPARING
        self._transient[j] = Marker.COMPARING

    def mark_swapped(self, i: int, j: int) -> None:
        self.clear_markers()
        self._transient[i] = Marker.SWAPPING
        self._transient[j] = Marker.SWAPPING

    def mark_written(self, k: int) -> None:
        self.clear_markers()
        self._transient[k] = Marker.SWAPPING

    def mark_sorted(self, i: int) -> None:
        self._transient[i] = Marker.DEFAULT
        self._sorted[i]    = True

    def mark_all_sorted(self) -> None:
        self._transient = [Marker.DEFAULT] * len(self.values)
        self._sorted    = [True] * len(self.values)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_sorted(self) -> bool:
        v = self.values
        return all(v[i] <= v[i + 1] for i in range(len(v) - 1))

    def to_dict(self) -> dict:
        return {
            "values":      list(self.values),
            "markers":     [m.value for m in self.markers],
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "writes":      self.writes,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __repr__(self) -> str:
        return (
            f"Dataset(n={len(self.values)}, comparisons={self.comparisons}, "
            f"swaps={self.swaps}, writes={self.writes})"
        )
