"""
Data model for E-Power.

Two families of types live here:

- Consumption inputs: the data the user wants analysed, either CSV text
  (`CsvConsumption`) or a photographed bill (`ImageConsumption`). Exactly one
  input is active per session and a new selection replaces it.
- Analysis results: the typed, immutable snapshot of the model's JSON reply.
  `AnalysisResult.from_dict` validates the whole payload up front, so a
  result is either complete or not built at all.
"""

import base64
from dataclasses import dataclass
from typing import List, Union

from epower.errors import ResponseFormatError

RENEWABLE_OPTIONS = ("solar", "wind")


@dataclass(frozen=True)
class CsvConsumption:
    text: str
    kind: str = "csv"


@dataclass(frozen=True)
class ImageConsumption:
    base64_data: str
    mime_type: str
    kind: str = "image"

    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.base64_data)


ConsumptionInput = Union[CsvConsumption, ImageConsumption]


# ---------------------------------------------------------------------------
# Field validation helpers
# ---------------------------------------------------------------------------

def _require(payload, key, path):
    if not isinstance(payload, dict):
        raise ResponseFormatError(f"{path or 'response'} must be an object")
    if key not in payload:
        raise ResponseFormatError(f"missing required field '{_join(path, key)}'")
    return payload[key]


def _join(path, key):
    return f"{path}.{key}" if path else key


def _string(value, path) -> str:
    if not isinstance(value, str):
        raise ResponseFormatError(f"'{path}' must be a string")
    return value


def _number(value, path) -> float:
    # bool is an int subclass; JSON true/false is never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResponseFormatError(f"'{path}' must be a number")
    return float(value)


def _integer(value, path) -> int:
    if isinstance(value, bool):
        raise ResponseFormatError(f"'{path}' must be an integer")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise ResponseFormatError(f"'{path}' must be an integer")
    return value


def _array(value, path) -> list:
    if not isinstance(value, list):
        raise ResponseFormatError(f"'{path}' must be an array")
    return value


def _strings(value, path) -> List[str]:
    return [_string(item, f"{path}[{i}]") for i, item in enumerate(_array(value, path))]


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PotentialSavings:
    kwh: float
    cost: float

    @classmethod
    def from_dict(cls, payload, path="potentialSavings"):
        return cls(
            kwh=_number(_require(payload, "kWh", path), _join(path, "kWh")),
            cost=_number(_require(payload, "cost", path), _join(path, "cost")),
        )


@dataclass(frozen=True)
class ApplianceAnalysis:
    appliance: str
    estimated_consumption: float
    recommendation: str
    potential_savings: PotentialSavings

    @classmethod
    def from_dict(cls, payload, path="applianceAnalysis[0]"):
        return cls(
            appliance=_string(_require(payload, "appliance", path), _join(path, "appliance")),
            estimated_consumption=_number(
                _require(payload, "estimatedConsumption", path),
                _join(path, "estimatedConsumption"),
            ),
            recommendation=_string(
                _require(payload, "recommendation", path), _join(path, "recommendation")
            ),
            potential_savings=PotentialSavings.from_dict(
                _require(payload, "potentialSavings", path), _join(path, "potentialSavings")
            ),
        )


@dataclass(frozen=True)
class ForecastPoint:
    hour: int
    output_percentage: float

    @property
    def label(self) -> str:
        """Clock label for the point; the 48-hour forecast wraps at midnight."""
        return f"{self.hour % 24}:00"

    @classmethod
    def from_dict(cls, payload, path="forecast[0]"):
        return cls(
            hour=_integer(_require(payload, "hour", path), _join(path, "hour")),
            output_percentage=_number(
                _require(payload, "outputPercentage", path), _join(path, "outputPercentage")
            ),
        )


@dataclass(frozen=True)
class RenewableAnalysis:
    best_option: str
    forecast: List[ForecastPoint]
    recommendations: List[str]

    @classmethod
    def from_dict(cls, payload, path="renewableAnalysis"):
        best_option = _string(_require(payload, "bestOption", path), _join(path, "bestOption"))
        if best_option not in RENEWABLE_OPTIONS:
            raise ResponseFormatError(
                f"'{_join(path, 'bestOption')}' must be one of {', '.join(RENEWABLE_OPTIONS)}"
            )
        forecast_path = _join(path, "forecast")
        forecast = [
            ForecastPoint.from_dict(item, f"{forecast_path}[{i}]")
            for i, item in enumerate(_array(_require(payload, "forecast", path), forecast_path))
        ]
        recommendations = _strings(
            _require(payload, "recommendations", path), _join(path, "recommendations")
        )
        return cls(best_option=best_option, forecast=forecast, recommendations=recommendations)


@dataclass(frozen=True)
class AnalysisResult:
    appliance_analysis: List[ApplianceAnalysis]
    renewable_analysis: RenewableAnalysis
    action_plan: List[str]

    @classmethod
    def from_dict(cls, payload):
        """Validate a decoded model reply and build the result.

        Raises ResponseFormatError on the first missing or mistyped field.
        """
        appliances = _array(_require(payload, "applianceAnalysis", ""), "applianceAnalysis")
        return cls(
            appliance_analysis=[
                ApplianceAnalysis.from_dict(item, f"applianceAnalysis[{i}]")
                for i, item in enumerate(appliances)
            ],
            renewable_analysis=RenewableAnalysis.from_dict(
                _require(payload, "renewableAnalysis", "")
            ),
            action_plan=_strings(_require(payload, "actionPlan", ""), "actionPlan"),
        )
