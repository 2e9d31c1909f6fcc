"""Plotly figures for the consumption preview and the renewable forecast."""

import pandas as pd
import plotly.express as px

SOURCE_COLORS = {"solar": "#F59E0B", "wind": "#3B82F6"}


def forecast_frame(forecast):
    """One row per forecast point with its clock label and output percentage."""
    return pd.DataFrame(
        {
            "hour": [point.hour for point in forecast],
            "Hour": [point.label for point in forecast],
            "Output (%)": [point.output_percentage for point in forecast],
        }
    )


def forecast_chart(renewable):
    """Line chart of the 48-hour forecast.

    Points are placed by their absolute hour and labelled with the wrapped clock
    hour, so the second day does not fold back onto the first.
    """
    data = forecast_frame(renewable.forecast)
    color = SOURCE_COLORS.get(renewable.best_option, SOURCE_COLORS["solar"])

    fig = px.line(
        data,
        x="hour",
        y="Output (%)",
        markers=True,
        hover_data={"Hour": True, "hour": False},
        title=f"{renewable.best_option.capitalize()} Output Forecast",
        labels={"hour": "Hour", "Output (%)": "Output (%)"},
    )
    fig.update_traces(line=dict(color=color, width=3), marker=dict(size=6, color=color))
    tick_rows = data.iloc[::3]
    fig.update_layout(
        xaxis=dict(
            title="Hour",
            tickmode="array",
            tickvals=tick_rows["hour"].tolist(),
            ticktext=tick_rows["Hour"].tolist(),
        ),
        yaxis=dict(title="Output (%)", ticksuffix="%"),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def consumption_chart(df):
    """Bar chart of the uploaded readings: first column on x, second on y."""
    if df.shape[1] < 2:
        raise ValueError("Consumption preview needs at least two columns")
    x_column, y_column = df.columns[0], df.columns[1]
    fig = px.bar(
        df,
        x=x_column,
        y=y_column,
        title="Your Consumption Data",
        labels={x_column: x_column, y_column: y_column},
    )
    fig.update_layout(plot_bgcolor="rgba(0,0,0,0)", paper_bgcolor="rgba(0,0,0,0)", height=300)
    return fig
