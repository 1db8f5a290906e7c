"""Fleet Telemetry Dashboard: Streamlit + Plotly over the gpstelemetry engine."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    ACCENT_COLOR,
    GNSS_STATUS_LABELS,
    MOVEMENT_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    DeviceNotFoundError,
    TelemetryDataError,
    format_distance,
    format_duration,
    format_share,
    format_speed,
    render_device_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Fleet Telemetry",
    page_icon="\U0001f69a",
    layout="wide",
)


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Fleet Telemetry")

selection = render_device_sidebar()
if selection is None:
    st.stop()

service = selection.service
imei = selection.imei


# ── Compute report ───────────────────────────────────────────────────────────

with st.spinner("Computing metrics..."):
    try:
        report = service.dashboard_report(imei, selection.start, selection.end)
        route = service.route(imei, selection.start, selection.end) if imei else []
        gnss_counts = service.gnss_status_counts(imei) if imei else None
    except TelemetryDataError as exc:
        st.error(f"Failed to load telemetry: {exc}")
        st.stop()

metrics = report.base_metrics
movement = metrics.movement_stats


# ── Header ───────────────────────────────────────────────────────────────────

st.markdown(f"# {imei or 'All devices'}")
if imei:
    try:
        latest = service.latest_record(imei)
    except DeviceNotFoundError:
        st.warning(f"No telemetry found for device {imei}.")
    else:
        st.markdown(
            f"Last seen **{latest.log_timestamp:%Y-%m-%d %H:%M:%S}**"
            f" at {latest.location or f'{latest.lat:.5f}, {latest.lng:.5f}'}"
            f" | engine {latest.engine_status or '?'} | {format_speed(latest.speed)}"
        )

if report.total_records_processed == 0:
    st.info("No records in the selected window.")
    st.stop()


# ── KPI metrics ──────────────────────────────────────────────────────────────

kpi1, kpi2, kpi3, kpi4 = st.columns(4)
kpi1.metric("Distance", format_distance(metrics.total_distance))
kpi2.metric("Duration", format_duration(metrics.total_duration))
kpi3.metric("Avg Speed", format_speed(metrics.average_speed))
kpi4.metric("Max Speed", format_speed(metrics.max_speed))

kpi5, kpi6, kpi7, kpi8 = st.columns(4)
kpi5.metric("Odometer Sum", f"{report.total_odometer_sum.value:,.0f} {report.total_odometer_sum.unit}")
kpi6.metric(
    "Avg Battery",
    f"{report.average_battery_voltage.value:.2f} {report.average_battery_voltage.unit}",
)
kpi7.metric(
    "GNSS Good Fix",
    report.gnss_fix.good,
    delta=format_share(report.gnss_fix.good, report.gnss_fix.good + report.gnss_fix.bad),
    delta_color="off",
)
kpi8.metric("Records", report.total_records_processed)


# ── Chart 1 & 2: Movement breakdown + GSM signal ────────────────────────────

col_movement, col_gsm = st.columns(2)

with col_movement:
    st.subheader("Movement Breakdown")
    durations = {
        "Moving": movement.total_moving_time,
        "Idling": movement.total_idling_time,
        "Stopped": movement.total_stopped_time,
    }
    if movement.total_classified_time <= 0:
        st.warning("No classified movement in this window.")
    else:
        fig_movement = go.Figure(go.Bar(
            x=list(durations.values()),
            y=list(durations.keys()),
            orientation="h",
            marker_color=[MOVEMENT_COLORS[k] for k in durations],
            text=[format_duration(v) for v in durations.values()],
            textposition="auto",
            hovertemplate="%{y}: %{text}<extra></extra>",
        ))
        fig_movement.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            xaxis_title="Seconds",
            height=300,
        )
        st.plotly_chart(fig_movement, use_container_width=True)

with col_gsm:
    st.subheader("GSM Signal Levels")
    gsm = report.gsm_signal_distribution
    if not gsm:
        st.warning("No GSM signal readings.")
    else:
        fig_gsm = go.Figure(go.Bar(
            x=[str(level) for level in gsm],
            y=list(gsm.values()),
            marker_color=ACCENT_COLOR,
            hovertemplate="Level %{x}: %{y} records<extra></extra>",
        ))
        fig_gsm.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            xaxis_title="Signal level",
            yaxis_title="Records",
            height=300,
        )
        st.plotly_chart(fig_gsm, use_container_width=True)


# ── Chart 3: Route ──────────────────────────────────────────────────────────

if imei:
    st.subheader("Route")
    if len(route) < 2:
        st.warning("Not enough positions to draw a route.")
    else:
        fig_route = go.Figure(go.Scattermap(
            lat=[p.lat for p in route],
            lon=[p.lng for p in route],
            mode="lines+markers",
            line=dict(color=ACCENT_COLOR, width=3),
            marker=dict(size=5),
            text=[f"{p.timestamp:%H:%M:%S} {p.location}" for p in route],
            hovertemplate="%{text}<extra></extra>",
        ))
        fig_route.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            map=dict(
                style="open-street-map",
                center=dict(lat=route[-1].lat, lon=route[-1].lng),
                zoom=12,
            ),
            height=450,
        )
        st.plotly_chart(fig_route, use_container_width=True)


# ── GNSS status tally (full device history) ─────────────────────────────────

if gnss_counts is not None:
    st.subheader("GNSS Status (all time)")
    cols = st.columns(len(GNSS_STATUS_LABELS))
    for col, (status, label) in zip(cols, GNSS_STATUS_LABELS.items(), strict=True):
        col.metric(f"{status} — {label}", gnss_counts[status])
