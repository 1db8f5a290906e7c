"""Sensor Trends: raw values of one sensor code over time, plus the records table."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from gpstelemetry.sensors import SENSOR_NAMES, SENSOR_UNITS, sensor_name

from shared import (
    ACCENT_COLOR,
    DEFAULT_TREND_CODE,
    PLOTLY_LAYOUT_DEFAULTS,
    TelemetryDataError,
    render_device_sidebar,
)

st.set_page_config(page_title="Sensor Trends", page_icon="\U0001f4c8", layout="wide")

st.sidebar.title("Sensor Trends")

selection = render_device_sidebar(allow_fleet=False)
if selection is None:
    st.stop()

imei = selection.imei
if imei is None:
    st.stop()

code_labels = {f"{code} — {name}": code for code, name in SENSOR_NAMES.items()}
default_label = next(
    (label for label, code in code_labels.items() if code == DEFAULT_TREND_CODE), None,
)
chosen = st.sidebar.selectbox(
    "Sensor code",
    list(code_labels),
    index=list(code_labels).index(default_label) if default_label else 0,
)
custom_code = st.sidebar.text_input("…or raw code", value="").strip()
sensor_code = custom_code or code_labels[chosen]

with st.spinner("Loading trend..."):
    try:
        trend = selection.service.sensor_trend(imei, sensor_code, selection.start, selection.end)
    except TelemetryDataError as exc:
        st.error(f"Failed to load trend: {exc}")
        st.stop()

name = sensor_name(sensor_code) or f"code {sensor_code}"
unit = SENSOR_UNITS.get(name, "")

st.markdown(f"# {name}" + (f" ({unit})" if unit else ""))
st.caption(f"Device {imei} | raw sensor code {sensor_code}")

reported = [v for v in trend.values if v is not None]
if not trend.labels:
    st.info("No records in the selected window.")
elif not reported:
    st.warning(f"Sensor code {sensor_code} was not reported in this window.")
else:
    fig = go.Figure(go.Scatter(
        x=trend.labels,
        y=trend.values,
        mode="lines+markers",
        line=dict(color=ACCENT_COLOR, width=2),
        marker=dict(size=4),
        connectgaps=False,
        hovertemplate="%{x}<br>%{y}<extra></extra>",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        xaxis_title="Capture time",
        yaxis_title=unit or "Raw value",
        height=420,
    )
    st.plotly_chart(fig, use_container_width=True)

    k1, k2, k3 = st.columns(3)
    k1.metric("Reported", f"{len(reported)} / {len(trend.values)}")
    k2.metric("Min", min(reported))
    k3.metric("Max", max(reported))


# ── Raw records ─────────────────────────────────────────────────────────────

st.subheader("Latest Records")
page_number = st.number_input("Page", min_value=1, value=1, step=1)
try:
    page = selection.service.record_page(imei, page=int(page_number), limit=25)
except TelemetryDataError as exc:
    st.error(f"Failed to load records: {exc}")
    st.stop()

st.dataframe(
    [
        {
            "timestamp": r.log_timestamp,
            "location": r.location,
            "lat": r.lat,
            "lng": r.lng,
            "speed": r.speed,
            "engine": r.engine_status,
            sensor_code: r.reading(sensor_code),
        }
        for r in page.data
    ],
    use_container_width=True,
)
if page.meta.total_pages:
    st.caption(f"Page {page.meta.current_page} of {page.meta.total_pages} ({page.meta.total_items} records)")
