"""Shared fixtures: a schema-conformant model reply and fakes for Gemini and uploads."""

import copy
import json

import pytest


def make_reply(appliances=3, hours=48, steps=4, best_option="solar"):
    """Build a decoded reply matching the structured-output schema."""
    return {
        "applianceAnalysis": [
            {
                "appliance": f"Appliance {i + 1}",
                "estimatedConsumption": 120.0 - i * 20,
                "recommendation": f"Replace appliance {i + 1} with an efficient model",
                "potentialSavings": {"kWh": 30.0 - i * 5, "cost": (30.0 - i * 5) * 0.15},
            }
            for i in range(appliances)
        ],
        "renewableAnalysis": {
            "bestOption": best_option,
            "forecast": [
                {"hour": h, "outputPercentage": float(max(0, 100 - abs(12 - h % 24) * 9))}
                for h in range(hours)
            ],
            "recommendations": [
                "Run the washing machine around midday.",
                "Charge devices from the grid overnight.",
            ],
        },
        "actionPlan": [f"Step {i + 1}" for i in range(steps)],
    }


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Stands in for genai.GenerativeModel and records every request."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, contents):
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text)


class FakeUpload:
    """Mimics streamlit's UploadedFile."""

    def __init__(self, name, type, data=b"", error=None):
        self.name = name
        self.type = type
        self._data = data
        self._error = error

    def getvalue(self):
        if self._error is not None:
            raise self._error
        return self._data


@pytest.fixture
def reply():
    return copy.deepcopy(make_reply())


@pytest.fixture
def reply_text(reply):
    return "\n  " + json.dumps(reply) + "\n"
