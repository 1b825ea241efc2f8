"""Transport bay aggregation."""
from typing import Sequence

import numpy as np


def aggregate_bays(sizes: Sequence[float]) -> int:
    """Whole troop/cargo capacity of a set of bays.

    Sizes are summed in single precision like the file stores them. Zero
    means the unit has no transport bay.
    """
    if not sizes:
        return 0
    total = np.asarray(sizes, dtype=np.float32).sum(dtype=np.float32)
    return int(np.floor(total))
