"""
Tests for plot() dispatch and plot_km().
"""

import altair as alt
import numpy as np
import pytest
from numpy.testing import assert_allclose

from pytte import km_est, plot, plot_km, SurvivalChart
from pytte.core.exceptions import ValidationError
from pytte.plotting.chart import NEJM_PALETTE


@pytest.fixture
def fit(adtte):
    return km_est(adtte, strata="TRTP")


def line_spec(chart: SurvivalChart) -> dict:
    """Vega-Lite spec of the step-line layer."""
    return chart.to_dict()["layer"][-1]


# ═══════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════


class TestDispatch:

    def test_km_solution_renders_survival_chart(self, fit):
        chart = plot(fit)
        assert isinstance(chart, SurvivalChart)
        assert isinstance(chart, alt.LayerChart)

    def test_options_forwarded(self, fit):
        spec = line_spec(plot(fit, fun="pct"))
        assert spec["encoding"]["y"]["title"] == "Survival probability (%)"

    def test_fallback_uses_own_plot(self):
        class HasPlot:
            def plot(self, **options):
                return ("plotted", options)

        assert plot(HasPlot(), color="red") == ("plotted", {"color": "red"})

    def test_unsupported_type(self):
        with pytest.raises(ValidationError, match="No plot method available for objects of type int"):
            plot(3)

    def test_plot_km_rejects_other_objects(self, adtte):
        with pytest.raises(ValidationError, match="expected a KMSolution"):
            plot_km(adtte)


# ═══════════════════════════════════════════════════════════════════════
# Chart structure
# ═══════════════════════════════════════════════════════════════════════


class TestChart:

    def test_serializes_with_ribbon_and_line(self, fit):
        spec = plot_km(fit).to_dict()
        assert len(spec["layer"]) == 2
        ribbon, line = spec["layer"]
        assert ribbon["mark"]["type"] == "area"
        assert line["mark"]["type"] == "line"
        assert line["mark"]["interpolate"] == "step-after"

    def test_one_colour_per_stratum(self, fit):
        color = line_spec(plot_km(fit))["encoding"]["color"]
        assert color["field"] == "strata"
        assert color["scale"]["domain"] == ["TRTP=Active", "TRTP=Placebo"]
        assert color["scale"]["range"] == list(NEJM_PALETTE)

    def test_data_has_transformed_columns(self, fit):
        chart = plot_km(fit, fun="event")
        data = chart.data
        assert {"est", "est_lower", "est_upper", "strata"} <= set(data.columns)
        assert_allclose(data["est"], 1 - fit.survival)

    def test_theme(self, fit):
        config = plot_km(fit).to_dict()["config"]
        assert config["background"] == "white"
        assert config["view"]["stroke"] == "black"
        assert config["axis"]["grid"] is True


# ═══════════════════════════════════════════════════════════════════════
# Transformations
# ═══════════════════════════════════════════════════════════════════════


class TestFun:

    def test_unrecognized_name_via_dispatch(self, fit):
        with pytest.raises(ValidationError, match="Unrecognized fun argument"):
            plot(fit, fun="hazard")

    def test_unrecognized_name_direct(self, fit):
        with pytest.raises(ValidationError, match="Unrecognized fun argument"):
            plot_km(fit, fun="hazard")

    def test_function_without_label(self, fit):
        with pytest.raises(ValidationError, match="No Y label defined"):
            plot_km(fit, fun=lambda y: y ** 2)

    def test_function_with_label(self, fit):
        chart = plot_km(fit, fun=lambda y: y ** 2, y_label="S(t) squared")
        spec = line_spec(chart)
        assert spec["encoding"]["y"]["title"] == "S(t) squared"
        assert_allclose(chart.data["est"], fit.survival ** 2)

    def test_cloglog_warns_when_curve_reaches_zero(self, adtte):
        fit = km_est(adtte[adtte["TRTP"] == "Placebo"])
        with pytest.warns(UserWarning, match="NAs introduced by y-axis transformation"):
            chart = plot_km(fit, fun="cloglog")
        assert np.all(np.isfinite(chart.data["est"]))

    def test_log_keeps_all_rows(self, adtte):
        fit = km_est(adtte[adtte["TRTP"] == "Placebo"])
        chart = plot_km(fit, fun="log")
        assert len(chart.data) == len(fit.time)
        assert np.all(np.isfinite(chart.data["est"]))


# ═══════════════════════════════════════════════════════════════════════
# Axes
# ═══════════════════════════════════════════════════════════════════════


class TestAxes:

    def test_x_label_from_param(self, fit):
        spec = line_spec(plot_km(fit))
        assert spec["encoding"]["x"]["title"] == "Time to First Dermatologic Event"

    def test_x_label_with_units(self, fit):
        spec = line_spec(plot_km(fit, x_units="days"))
        assert spec["encoding"]["x"]["title"] == "Time to First Dermatologic Event (days)"

    def test_x_label_defaults_to_time(self, random_adtte):
        spec = line_spec(plot_km(km_est(random_adtte)))
        assert spec["encoding"]["x"]["title"] == "time"

    def test_explicit_x_label_not_suffixed(self, fit):
        spec = line_spec(plot_km(fit, x_label="Study day", x_units="days"))
        assert spec["encoding"]["x"]["title"] == "Study day"

    def test_default_x_ticks_cover_time(self, fit):
        x = line_spec(plot_km(fit))["encoding"]["x"]
        values = x["axis"]["values"]
        assert values[0] <= 0.0
        assert values[-1] >= fit.time.max()
        assert x["scale"]["domain"] == [values[0], values[-1]]

    def test_default_y_ticks_surv(self, fit):
        y = line_spec(plot_km(fit))["encoding"]["y"]
        assert_allclose(y["axis"]["values"], [0.0, 0.2, 0.4, 0.6, 0.8, 1.0])
        assert y["axis"]["format"] == ".2f"

    def test_explicit_ticks(self, fit):
        y = line_spec(plot_km(fit, fun="pct", y_ticks=[0, 50, 100]))["encoding"]["y"]
        assert y["axis"]["values"] == [0.0, 50.0, 100.0]
        assert y["scale"]["domain"] == [0.0, 100.0]


# ═══════════════════════════════════════════════════════════════════════
# Legend
# ═══════════════════════════════════════════════════════════════════════


class TestLegend:

    @pytest.mark.parametrize("position", ["top", "bottom", "left", "right"])
    def test_named_positions(self, fit, position):
        color = line_spec(plot_km(fit, legend_position=position))["encoding"]["color"]
        assert color["legend"]["orient"] == position

    def test_none_hides_legend(self, fit):
        color = line_spec(plot_km(fit, legend_position="none"))["encoding"]["color"]
        assert color["legend"] is None

    def test_unsupported_string(self, fit):
        with pytest.raises(ValidationError, match="Invalid legend position"):
            plot_km(fit, legend_position="center")

    def test_two_coordinates(self, fit):
        chart = plot_km(fit, legend_position=(0.5, 0.5), width=600, height=400)
        legend = line_spec(chart)["encoding"]["color"]["legend"]
        assert legend["orient"] == "none"
        assert legend["legendX"] == 300.0
        assert legend["legendY"] == 200.0

    def test_three_coordinates(self, fit):
        with pytest.raises(ValidationError, match="coordinates"):
            plot_km(fit, legend_position=(0.1, 0.2, 0.3))

    def test_non_numeric_sequence(self, fit):
        with pytest.raises(ValidationError, match="Invalid legend position"):
            plot_km(fit, legend_position=("a", "b"))
