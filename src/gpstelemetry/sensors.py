"""Static sensor-code table and the iodata decoder.

Raw readings arrive as ``{"<code>": <number>}`` where the code is an AVL
parameter ID assigned by the device firmware. Only the codes listed here are
given a semantic name; everything else is dropped by :func:`decode_iodata`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from gpstelemetry.models.summary import ValueWithUnit

# Raw codes the engine reads directly
IGNITION_CODE = "239"
MOVEMENT_CODE = "240"
GNSS_STATUS_CODE = "69"
ODOMETER_CODE = "16"

SENSOR_NAMES: Mapping[str, str] = MappingProxyType({
    "1": "digital_input_1",
    "9": "analog_input_1",
    "16": "total_odometer",
    "17": "axis_x",
    "18": "axis_y",
    "19": "axis_z",
    "21": "gsm_signal",
    "24": "speed",
    "66": "external_voltage",
    "67": "battery_voltage",
    "68": "battery_current",
    "69": "gnss_status",
    "80": "data_mode",
    "113": "battery_level",
    "179": "digital_output_1",
    "181": "gnss_pdop",
    "182": "gnss_hdop",
    "199": "trip_odometer",
    "200": "sleep_mode",
    "239": "ignition",
    "240": "movement",
    "241": "active_gsm_operator",
})

SENSOR_UNITS: Mapping[str, str] = MappingProxyType({
    "analog_input_1": "mV",
    "total_odometer": "m",
    "axis_x": "mG",
    "axis_y": "mG",
    "axis_z": "mG",
    "speed": "km/h",
    "external_voltage": "mV",
    "battery_voltage": "V",
    "battery_current": "A",
    "battery_level": "%",
    "trip_odometer": "m",
})


def sensor_name(code: str) -> str | None:
    """Semantic name for a raw code, or None if the code is unassigned."""
    return SENSOR_NAMES.get(code)


def decode_iodata(iodata: Mapping[str, int | float]) -> dict[str, ValueWithUnit]:
    """Map raw sensor codes to ``{name: ValueWithUnit}``, dropping unknown codes."""
    decoded: dict[str, ValueWithUnit] = {}
    for code, raw in iodata.items():
        name = sensor_name(code)
        if name is None:
            continue
        decoded[name] = ValueWithUnit(value=float(raw), unit=SENSOR_UNITS.get(name, ""))
    return decoded
