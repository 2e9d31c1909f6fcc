"""
E-Power: AI-powered energy analysis for households.

Sends smart-meter readings or a photographed electricity bill, together with
the user's location, to Google's Generative AI and turns the structured reply
into an appliance breakdown, a renewable-energy forecast and an action plan.
"""

__version__ = "0.1.0"
