from fastapi import APIRouter, Query

from engine.catalog.products import DEFAULT_CATALOG, catalog_to_dict

router = APIRouter()


@router.get(
    "/inverters",
    summary="List inverters",
    description="Inverters in the reference catalog, optionally filtered by DC bus voltage or minimum kVA.",
)
async def list_inverters(
    voltage_bus: float | None = Query(default=None, gt=0),
    min_kva: float | None = Query(default=None, ge=0),
):
    items = catalog_to_dict(DEFAULT_CATALOG)["inverters"]
    if voltage_bus is not None:
        items = [i for i in items if i["voltage_bus"] == voltage_bus]
    if min_kva is not None:
        items = [i for i in items if i["kva_rating"] >= min_kva]
    return items


@router.get("/batteries", summary="List batteries")
async def list_batteries(
    chemistry: str | None = Query(default=None, description="lithium, agm or flooded"),
):
    items = catalog_to_dict(DEFAULT_CATALOG)["batteries"]
    if chemistry is not None:
        items = [i for i in items if i["chemistry"] == chemistry.lower()]
    return items


@router.get("/panels", summary="List solar panels")
async def list_panels():
    return catalog_to_dict(DEFAULT_CATALOG)["panels"]
