"""
Streamlit views for an AnalysisResult.

The text builders (`appliance_card`, `action_plan_items`, `renewable_summary`)
are plain functions; `render_results` lays them out on the page.
"""

import streamlit as st

from epower.charts import forecast_chart

LOADING_MESSAGE = "Our AI is analyzing your data... this may take a moment."


def escape_dollars(text):
    """Stop st.markdown from reading a pair of `$` as a LaTeX span."""
    return text.replace("$", "\\$")


def appliance_card(entry):
    """Markdown body of one appliance card."""
    savings = entry.potential_savings
    return (
        f"#### 💡 {escape_dollars(entry.appliance)}\n\n"
        f"⚡ Est. Consumption: **{entry.estimated_consumption:g} kWh/month**\n\n"
        f"💰 Potential Savings: **\\${savings.cost:.2f}/month** ({savings.kwh:g} kWh)\n\n"
        f"> {escape_dollars(entry.recommendation)}"
    )


def appliance_cards(result):
    """One card per appliance, in reply order."""
    return [appliance_card(entry) for entry in result.appliance_analysis]


def action_plan_items(result):
    """Action-plan steps in reply order, escaped for markdown."""
    return [escape_dollars(step) for step in result.action_plan]


def renewable_summary(location, best_option):
    """Sentence naming the location and the recommended source."""
    return (
        f"For **{escape_dollars(location)}**, **{best_option.capitalize()}** is the most "
        "promising renewable source."
    )


def render_action_plan(result):
    """Render the action plan as a checklist."""
    st.markdown("### **_Your Action Plan_**")
    st.write("Here are the top recommendations from our AI to help you start saving immediately:")
    for step in action_plan_items(result):
        st.markdown(f"✅ {step}")


def render_appliances(result):
    """Render the appliance cards in a three-column grid."""
    st.markdown("### **_AI Load Estimator Results_**")
    cards = appliance_cards(result)
    if not cards:
        st.info("The analysis did not identify any appliances.")
        return
    columns = st.columns(3)
    for idx, card in enumerate(cards):
        with columns[idx % 3]:
            with st.container(border=True):
                st.markdown(card)


def render_renewables(result, location):
    """Render the source summary, the forecast chart and the usage tips."""
    renewable = result.renewable_analysis
    st.markdown("### **_Renewables Integration_**")
    icon = "☀️" if renewable.best_option == "solar" else "🌬️"
    st.info(f"{icon} {renewable_summary(location, renewable.best_option)}")

    chart_col, tips_col = st.columns([2, 1])
    with chart_col:
        st.markdown("#### 48-Hour Availability Forecast")
        st.plotly_chart(forecast_chart(renewable), use_container_width=True, key="forecast_chart")
    with tips_col:
        st.markdown("#### Usage Recommendations")
        for idx, recommendation in enumerate(renewable.recommendations, start=1):
            st.markdown(f"**{idx}.** {escape_dollars(recommendation)}")


def render_results(result, location):
    """Lay out the three result views in tabs."""
    tabs = st.tabs(["Action Plan", "Load Estimator", "Renewables"])
    with tabs[0]:
        render_action_plan(result)
    with tabs[1]:
        render_appliances(result)
    with tabs[2]:
        render_renewables(result, location)
