"""Equipment catalog records and the built-in reference catalog.

Prices are in Nigerian naira (NGN).  A deployment normally loads its own
catalog; :data:`DEFAULT_CATALOG` mirrors the wizard's launch product list.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class InverterProduct:
    """Purchasable inverter."""
    model_name: str
    kva_rating: float
    voltage_bus: float
    unit_cost: float
    surge_capacity: str = ""
    available: bool = True


@dataclass(frozen=True)
class BatteryProduct:
    """Purchasable battery unit."""
    model_name: str
    chemistry: str  # lithium, agm, flooded
    voltage: float
    capacity_kwh: float
    unit_cost: float
    available: bool = True

    @property
    def capacity_ah(self) -> float:
        return self.capacity_kwh * 1000.0 / self.voltage


@dataclass(frozen=True)
class PanelProduct:
    """Purchasable PV module."""
    model_name: str
    rated_power: float
    unit_cost: float
    derating_factor: float = 0.8
    available: bool = True


@dataclass(frozen=True)
class EquipmentCatalog:
    inverters: tuple[InverterProduct, ...] = field(default_factory=tuple)
    batteries: tuple[BatteryProduct, ...] = field(default_factory=tuple)
    panels: tuple[PanelProduct, ...] = field(default_factory=tuple)

    def available_inverters(self) -> list[InverterProduct]:
        return [p for p in self.inverters if p.available]

    def available_batteries(self) -> list[BatteryProduct]:
        return [p for p in self.batteries if p.available]

    def available_panels(self) -> list[PanelProduct]:
        return [p for p in self.panels if p.available]


DEFAULT_CATALOG = EquipmentCatalog(
    inverters=(
        InverterProduct("Felicity 1.5kVA Inverter", 1.5, 12, 85_000, "200% for 5s"),
        InverterProduct("Felicity 2.5kVA Inverter", 2.5, 24, 120_000, "200% for 5s"),
        InverterProduct("Felicity 3.5kVA Inverter", 3.5, 24, 165_000, "200% for 5s"),
        InverterProduct("Felicity 5kVA Inverter", 5.0, 48, 220_000, "200% for 5s"),
    ),
    batteries=(
        BatteryProduct("Lithium 5kWh 48V", "lithium", 48, 5.0, 225_000),
        BatteryProduct("Lithium 100Ah 24V", "lithium", 24, 2.4, 130_000),
        BatteryProduct("AGM 100Ah 12V", "agm", 12, 1.2, 70_000),
        BatteryProduct("AGM 200Ah 12V", "agm", 12, 2.4, 130_000),
        BatteryProduct("Flooded 100Ah 12V", "flooded", 12, 1.2, 30_000),
        BatteryProduct("Flooded 220Ah 12V", "flooded", 12, 2.64, 62_000),
    ),
    panels=(
        PanelProduct("Monocrystalline 400W", 400, 60_000),
        PanelProduct("Polycrystalline 350W", 350, 45_000),
        PanelProduct("Monocrystalline 450W", 450, 67_500),
    ),
)


def catalog_to_dict(catalog: EquipmentCatalog) -> dict[str, list[dict]]:
    """Serialize a catalog for API responses."""
    return {
        "inverters": [asdict(p) for p in catalog.inverters],
        "batteries": [
            {**asdict(p), "capacity_ah": round(p.capacity_ah, 1)} for p in catalog.batteries
        ],
        "panels": [asdict(p) for p in catalog.panels],
    }
