"""
Tests for TTEDesign: validation, row filtering, strata labels.
"""

import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose

from pytte.core.exceptions import MissingColumnError, ValidationError
from pytte.survival.design import OVERALL_LABEL, TTEDesign


class TestFromAdam:

    def test_event_is_reversed_censoring(self, placebo):
        design = TTEDesign.from_adam(placebo)
        assert_allclose(design.event, [1, 0, 1, 0, 1, 1])
        assert design.n_events == 4

    def test_strata_string_normalized(self, adtte):
        design = TTEDesign.from_adam(adtte, "TRTP")
        assert design.strata == ("TRTP",)

    def test_empty_strata_is_overall(self, adtte):
        design = TTEDesign.from_adam(adtte, [])
        assert design.strata == ()
        assert design.formula == "Surv(AVAL, 1-CNSR) ~ 1"

    def test_non_string_strata_rejected(self, adtte):
        with pytest.raises(ValidationError, match="expected column names"):
            TTEDesign.from_adam(adtte, [1, 2])

    def test_missing_columns_listed_together(self):
        df = pd.DataFrame({"USUBJID": ["a"]})
        with pytest.raises(MissingColumnError) as exc_info:
            TTEDesign.from_adam(df, "TRTP")
        assert exc_info.value.missing == ("TRTP", "CNSR", "AVAL")

    def test_dropped_rows_counted(self, adtte):
        adtte.loc[[0, 1], "AVAL"] = np.nan
        adtte.loc[2, "SEX"] = np.nan
        design = TTEDesign.from_adam(adtte, "SEX")
        assert design.n == 9
        assert design.n_dropped == 3

    def test_strata_missing_ignored_without_strata(self, adtte):
        adtte.loc[2, "SEX"] = np.nan
        assert TTEDesign.from_adam(adtte).n == 12


class TestGroups:

    def test_overall(self, adtte):
        groups = list(TTEDesign.from_adam(adtte).groups())
        assert [label for label, _ in groups] == [OVERALL_LABEL]
        assert len(groups[0][1]) == 12

    def test_labels_and_sizes(self, adtte):
        groups = dict(TTEDesign.from_adam(adtte, "TRTP").groups())
        assert list(groups) == ["TRTP=Active", "TRTP=Placebo"]
        assert [len(rows) for rows in groups.values()] == [6, 6]

    def test_single_level_after_subsetting(self, adtte):
        females = adtte[adtte["SEX"] == "F"]
        labels = [label for label, _ in TTEDesign.from_adam(females, ["SEX"]).groups()]
        assert labels == ["F"]

    def test_unused_categories_skipped(self, adtte):
        adtte["TRTP"] = pd.Categorical(adtte["TRTP"], categories=["Active", "Placebo", "Other"])
        labels = [label for label, _ in TTEDesign.from_adam(adtte, "TRTP").groups()]
        assert labels == ["TRTP=Active", "TRTP=Placebo"]


class TestParameterMetadata:

    def test_both_columns(self, adtte):
        metadata, warnings = TTEDesign.from_adam(adtte).parameter_metadata()
        assert metadata == {
            "PARAM": "Time to First Dermatologic Event",
            "PARAMCD": "TTDE",
        }
        assert warnings == []

    def test_skipped_when_paramcd_is_stratum(self, adtte):
        metadata, _ = TTEDesign.from_adam(adtte, "PARAMCD").parameter_metadata()
        assert metadata == {}
