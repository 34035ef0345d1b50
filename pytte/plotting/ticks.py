"""
Axis break proposals.

pretty() returns about ``n`` equally spaced round values covering the
range of the data, like R's pretty(). Breaks come from matplotlib's
MaxNLocator restricted to 1-2-5 steps.
"""

import numpy as np
from matplotlib.ticker import MaxNLocator
from numpy.typing import ArrayLike, NDArray


def pretty(values: ArrayLike, n: int = 5) -> NDArray:
    """
    Propose round axis breaks covering ``values``.

    Args:
        values: Data whose range must be covered; non-finite values are ignored
        n: Desired number of intervals

    Returns:
        Sorted break positions; the first is <= min(values) and the last
        >= max(values). Empty when no value is finite.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return np.empty(0, dtype=np.float64)

    locator = MaxNLocator(nbins=n, steps=[1, 2, 5, 10])
    ticks = locator.tick_values(float(arr.min()), float(arr.max()))
    # Drop float noise such as 0.30000000000000004
    return np.round(np.asarray(ticks, dtype=np.float64), 10)
