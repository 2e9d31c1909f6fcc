"""
Gemini-backed energy analysis.

`EnergyAdvisor` turns a consumption input and a location into one request to
Google's Generative AI and parses the JSON reply into an `AnalysisResult`.
"""

import copy
import json
import logging

import google.generativeai as genai

from epower.errors import AnalysisError
from epower.models import AnalysisResult
from epower.schema import FULL_ANALYSIS_SCHEMA

logger = logging.getLogger(__name__)

ELECTRICITY_RATE_USD = 0.15

MISSING_INPUT_MESSAGE = "Please provide a location and your consumption data (CSV or bill image)."
ANALYSIS_FAILED_MESSAGE = (
    "Failed to generate the full energy analysis. The model may have returned an "
    "unexpected format or could not process the provided data."
)


class EnergyAdvisor:
    """
    Requests a full energy analysis from a Gemini model.

    Methods:
    - build_prompt: Writes the instruction for a CSV or bill-image input and a location.
    - build_contents: Pairs the prompt with the bill image when there is one.
    - parse_response: Decodes and validates the model's JSON reply.
    - analyze: Runs the request and returns an AnalysisResult or raises AnalysisError.
    """

    def __init__(self, settings=None, model=None):
        if model is None:
            if settings is None:
                raise ValueError("settings are required when no model is given")
            genai.configure(api_key=settings.api_key)
            model = genai.GenerativeModel(
                settings.model_name,
                generation_config=genai.GenerationConfig(
                    response_mime_type="application/json",
                    response_schema=copy.deepcopy(FULL_ANALYSIS_SCHEMA),
                ),
            )
        self.model = model

    @staticmethod
    def build_prompt(consumption, location):
        """Write the single instruction describing the three required sections."""
        if consumption.kind == "csv":
            consumption_prompt = (
                "Analyze the following hourly power consumption data (in kWh) from a smart meter. "
                "The data represents one week of usage. Extrapolate to a full month (30 days) "
                f"for monthly estimates.\n\nCSV Data:\n{consumption.text}"
            )
        else:
            consumption_prompt = (
                "Analyze the electricity bill in the provided image. From the bill, identify the "
                "total monthly power consumption in kWh. If the bill shows daily or average usage, "
                "extrapolate to a full month (30 days)."
            )

        return f"""
        Act as an AI Energy Advisor named E-Power.
        {consumption_prompt}

        In addition, consider the user's location: "{location}".

        Based on a complete analysis of both the consumption data and the location, provide a single JSON response containing three distinct sections:
        1. 'applianceAnalysis': Identify the 3 most power-hungry appliances. For each, provide its name, estimated monthly consumption, a recommendation for an efficient replacement, and the potential monthly savings in kWh and USD (assume an electricity rate of ${ELECTRICITY_RATE_USD:.2f}/kWh).
        2. 'renewableAnalysis': Determine the best renewable option (solar or wind) for the location, generate a 48-hour energy availability forecast, and provide simple recommendations on when to use renewables versus the grid.
        3. 'actionPlan': Create a concise, actionable summary of 3-5 key steps the user should take to reduce their bills and use energy more efficiently, combining insights from both the appliance and renewable analyses.
        """

    def build_contents(self, consumption, location):
        """Return the request payload: plain text for CSV, image part plus text for a bill."""
        prompt = self.build_prompt(consumption, location)
        if consumption.kind == "image":
            return [
                {"mime_type": consumption.mime_type, "data": consumption.raw_bytes()},
                prompt,
            ]
        return prompt

    @staticmethod
    def parse_response(text):
        return AnalysisResult.from_dict(json.loads(text.strip()))

    def analyze(self, consumption, location):
        """Run one analysis request. No retries; any failure discards the whole reply."""
        if not location or not location.strip() or consumption is None:
            raise AnalysisError(MISSING_INPUT_MESSAGE)

        try:
            response = self.model.generate_content(self.build_contents(consumption, location))
            return self.parse_response(response.text)
        except Exception as e:
            logger.exception("Energy analysis failed for location %r: %s", location, e)
            raise AnalysisError(ANALYSIS_FAILED_MESSAGE) from e
