"""
Structured-output schema sent with every analysis request.

The model is asked to reply with JSON that already matches
`epower.models.AnalysisResult`. Ranges and units that the schema format cannot
express are stated in the field descriptions.
"""

APPLIANCE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "appliance": {
                "type": "string",
                "description": "Name of the appliance, e.g., 'Old Refrigerator' or 'HVAC System'.",
            },
            "estimatedConsumption": {
                "type": "number",
                "description": "Estimated monthly power consumption in kWh.",
            },
            "recommendation": {
                "type": "string",
                "description": "Recommendation for an energy-efficient replacement, e.g., "
                "'ENERGY STAR certified inverter refrigerator'.",
            },
            "potentialSavings": {
                "type": "object",
                "properties": {
                    "kWh": {
                        "type": "number",
                        "description": "Potential monthly energy savings in kWh.",
                    },
                    "cost": {
                        "type": "number",
                        "description": "Estimated monthly cost savings in USD, assuming $0.15/kWh.",
                    },
                },
                "required": ["kWh", "cost"],
            },
        },
        "required": ["appliance", "estimatedConsumption", "recommendation", "potentialSavings"],
    },
}

RENEWABLE_SCHEMA = {
    "type": "object",
    "properties": {
        "bestOption": {
            "type": "string",
            "enum": ["solar", "wind"],
            "description": "The most suitable renewable energy source for the location.",
        },
        "forecast": {
            "type": "array",
            "description": "A 48-hour availability forecast, with one entry per hour.",
            "items": {
                "type": "object",
                "properties": {
                    "hour": {"type": "integer", "description": "The hour of the day (0-47)."},
                    "outputPercentage": {
                        "type": "number",
                        "description": "The estimated power output as a percentage of "
                        "maximum capacity (0-100).",
                    },
                },
                "required": ["hour", "outputPercentage"],
            },
        },
        "recommendations": {
            "type": "array",
            "description": "A list of actionable recommendations for energy usage based on the forecast.",
            "items": {"type": "string"},
        },
    },
    "required": ["bestOption", "forecast", "recommendations"],
}

ACTION_PLAN_SCHEMA = {
    "type": "array",
    "description": "A concise, actionable summary of 3-5 key steps the user should take to reduce "
    "their bills and use energy more efficiently, based on all the above findings.",
    "items": {"type": "string"},
}

FULL_ANALYSIS_SCHEMA = {
    "type": "object",
    "properties": {
        "applianceAnalysis": APPLIANCE_SCHEMA,
        "renewableAnalysis": RENEWABLE_SCHEMA,
        "actionPlan": ACTION_PLAN_SCHEMA,
    },
    "required": ["applianceAnalysis", "renewableAnalysis", "actionPlan"],
}
