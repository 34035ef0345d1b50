"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pandas as pd
import pytest


PARAM_LABEL = "Time to First Dermatologic Event"

# Placebo: AVAL 1..6, events at 1, 3, 5, 6 (textbook survfit example)
# Active:  AVAL 2..12 by 2, events at 2 and 8
PLACEBO_AVAL = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
PLACEBO_CNSR = [0, 1, 0, 1, 0, 0]
ACTIVE_AVAL = [2.0, 4.0, 6.0, 8.0, 10.0, 12.0]
ACTIVE_CNSR = [0, 1, 1, 0, 1, 1]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def adtte():
    """Small ADTTE with two treatment arms and one parameter."""
    return pd.DataFrame({
        "USUBJID": [f"01-{i:03d}" for i in range(12)],
        "PARAM": PARAM_LABEL,
        "PARAMCD": "TTDE",
        "TRTP": ["Placebo"] * 6 + ["Active"] * 6,
        "SEX": ["F", "M"] * 6,
        "AVAL": PLACEBO_AVAL + ACTIVE_AVAL,
        "CNSR": PLACEBO_CNSR + ACTIVE_CNSR,
    })


@pytest.fixture
def placebo(adtte):
    """Placebo arm only."""
    return adtte[adtte["TRTP"] == "Placebo"].reset_index(drop=True)


@pytest.fixture
def random_adtte(rng):
    """Larger random ADTTE without PARAM columns."""
    n = 200
    return pd.DataFrame({
        "TRTP": rng.choice(["A", "B", "C"], size=n),
        "AVAL": np.round(rng.exponential(scale=100.0, size=n), 1) + 0.5,
        "CNSR": rng.binomial(1, 0.3, size=n),
    })
