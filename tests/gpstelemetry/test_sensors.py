"""Tests for the sensor-code table and iodata decoder."""

from __future__ import annotations

import pytest

from gpstelemetry.sensors import (
    GNSS_STATUS_CODE,
    IGNITION_CODE,
    MOVEMENT_CODE,
    ODOMETER_CODE,
    SENSOR_NAMES,
    SENSOR_UNITS,
    decode_iodata,
    sensor_name,
)


class TestSensorTable:
    def test_engine_codes_named(self) -> None:
        assert SENSOR_NAMES[IGNITION_CODE] == "ignition"
        assert SENSOR_NAMES[MOVEMENT_CODE] == "movement"
        assert SENSOR_NAMES[GNSS_STATUS_CODE] == "gnss_status"
        assert SENSOR_NAMES[ODOMETER_CODE] == "total_odometer"

    def test_units_keyed_by_name(self) -> None:
        assert SENSOR_UNITS["total_odometer"] == "m"
        assert SENSOR_UNITS["battery_voltage"] == "V"

    def test_every_unit_has_a_code(self) -> None:
        assert set(SENSOR_UNITS) <= set(SENSOR_NAMES.values())

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            SENSOR_NAMES["999"] = "bogus"  # type: ignore[index]

    def test_sensor_name_lookup(self) -> None:
        assert sensor_name("21") == "gsm_signal"
        assert sensor_name("12345") is None


class TestDecodeIodata:
    def test_known_code_with_unit(self) -> None:
        decoded = decode_iodata({"16": 1503422})
        assert decoded["total_odometer"].value == 1503422
        assert decoded["total_odometer"].unit == "m"

    def test_known_code_without_unit(self) -> None:
        decoded = decode_iodata({"21": 4})
        assert decoded["gsm_signal"].unit == ""

    @pytest.mark.parametrize("value", [-5, 0, 1e9, 3.75])
    def test_known_code_any_value(self, value) -> None:
        assert "battery_voltage" in decode_iodata({"67": value})

    @pytest.mark.parametrize("value", [-5, 0, 1e9, 3.75])
    def test_unknown_code_dropped(self, value) -> None:
        assert decode_iodata({"12345": value}) == {}

    def test_mixed(self) -> None:
        decoded = decode_iodata({"239": 1, "11": 893, "69": 2})
        assert set(decoded) == {"ignition", "gnss_status"}
        assert decoded["gnss_status"].value == 2.0

    def test_empty(self) -> None:
        assert decode_iodata({}) == {}
