from enum import Enum


# ---------------------------------------------------------------------------
# Marker Enum: maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class Marker(Enum):
    DEFAULT   = "default"     # steel blue: untouched this step
    COMPARING = "comparing"   # tomato: the pair being compared RIGHT NOW
    SWAPPING  = "swapping"    # lime: just swapped / written
    SORTED    = "sorted"      # purple: in its final position (sticky)

    @property
    def label(self) -> str:
        return self.value.capitalize()
