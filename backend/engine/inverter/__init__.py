"""Inverter sizing."""

from .sizer import InverterSpec, default_bus_voltage, size_inverter

__all__ = ["InverterSpec", "default_bus_voltage", "size_inverter"]
