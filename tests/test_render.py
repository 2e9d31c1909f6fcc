"""Tests for epower.render and epower.charts."""

import pytest

from conftest import make_reply
from epower.charts import SOURCE_COLORS, consumption_chart, forecast_chart, forecast_frame
from epower.inputs import ConsumptionLoader
from epower.models import AnalysisResult
from epower.render import (
    action_plan_items,
    appliance_card,
    appliance_cards,
    escape_dollars,
    renewable_summary,
)


def _result(**kwargs):
    return AnalysisResult.from_dict(make_reply(**kwargs))


class TestApplianceCards:
    @pytest.mark.parametrize("count", [0, 1, 3])
    def test_one_card_per_entry(self, count):
        assert len(appliance_cards(_result(appliances=count))) == count

    def test_card_contents(self):
        entry = _result().appliance_analysis[0]
        card = appliance_card(entry)
        assert "Appliance 1" in card
        assert "120 kWh/month" in card
        assert "4.50/month" in card
        assert "(30 kWh)" in card
        assert entry.recommendation in card

    def test_cards_follow_reply_order(self):
        cards = appliance_cards(_result())
        assert [card.split("\n")[0] for card in cards] == [
            "#### 💡 Appliance 1",
            "#### 💡 Appliance 2",
            "#### 💡 Appliance 3",
        ]


class TestEscapeDollars:
    def test_escapes_every_dollar(self):
        assert escape_dollars("saves $5 to $10") == "saves \\$5 to \\$10"

    def test_card_escapes_model_text(self):
        reply = make_reply()
        reply["applianceAnalysis"][0]["appliance"] = "$99 heater"
        reply["applianceAnalysis"][0]["recommendation"] = "saves $5 to $10 a month"
        card = appliance_card(AnalysisResult.from_dict(reply).appliance_analysis[0])
        assert "#### 💡 \\$99 heater" in card
        assert "> saves \\$5 to \\$10 a month" in card

    def test_action_plan_escaped(self):
        reply = make_reply()
        reply["actionPlan"] = ["Spend $20 on LEDs to save $5"]
        assert action_plan_items(AnalysisResult.from_dict(reply)) == ["Spend \\$20 on LEDs to save \\$5"]


class TestActionPlan:
    def test_items_in_input_order(self):
        result = _result(steps=5)
        assert action_plan_items(result) == ["Step 1", "Step 2", "Step 3", "Step 4", "Step 5"]


class TestRenewableSummary:
    def test_names_location_and_source(self):
        summary = renewable_summary("Nairobi, Kenya", "wind")
        assert "**Nairobi, Kenya**" in summary
        assert "**Wind**" in summary


class TestForecastChart:
    def test_frame_labels_wrap(self):
        frame = forecast_frame(_result().renewable_analysis.forecast)
        assert len(frame) == 48
        assert frame["Hour"].iloc[0] == "0:00"
        assert frame["Hour"].iloc[25] == "1:00"
        assert frame["Hour"].iloc[47] == "23:00"

    def test_single_line_with_48_points(self):
        fig = forecast_chart(_result().renewable_analysis)
        assert len(fig.data) == 1
        assert len(fig.data[0].x) == 48
        assert list(fig.data[0].x) == list(range(48))

    def test_tick_labels_are_clock_hours(self):
        fig = forecast_chart(_result().renewable_analysis)
        assert list(fig.layout.xaxis.ticktext)[:3] == ["0:00", "3:00", "6:00"]
        assert "0:00" in list(fig.layout.xaxis.ticktext)[8:]

    @pytest.mark.parametrize("option", ["solar", "wind"])
    def test_color_follows_source(self, option):
        fig = forecast_chart(_result(best_option=option).renewable_analysis)
        assert fig.data[0].line.color == SOURCE_COLORS[option]


class TestConsumptionChart:
    def test_sample_preview(self):
        df = ConsumptionLoader.to_frame(ConsumptionLoader.sample())
        fig = consumption_chart(df)
        assert len(fig.data[0].x) == 24

    def test_single_column_rejected(self):
        df = ConsumptionLoader.to_frame(ConsumptionLoader.sample())[["Hour"]]
        with pytest.raises(ValueError):
            consumption_chart(df)
