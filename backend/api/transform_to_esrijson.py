"""
GeoJSON → ESRI JSON converter (simple, polygon‑only)
====================================================

ArcGIS REST `query` endpoints expect the *EsriJSON* geometry dialect:

  • 'rings' instead of 'coordinates'
  • an explicit spatialReference.wkid (4326 = WGS84)

Coordinates are passed through untouched: no reprojection, no ring
winding fix, no closure check. The caller is trusted to send lon/lat.
"""
from __future__ import annotations
from typing import Any, Mapping

WGS84 = {"wkid": 4326}


class UnsupportedGeometryError(ValueError):
    """The resolved geometry is not a GeoJSON Polygon."""

    def __init__(self, geom_type: Any = None):
        self.geom_type = geom_type
        super().__init__("Only Polygon supported")


def _resolve(geo: Any) -> Mapping:
    """Bare geometry, or a Feature-like wrapper carrying one under 'geometry'."""
    if not isinstance(geo, Mapping):
        return {}
    if geo.get("type"):
        return geo
    inner = geo.get("geometry")
    return inner if isinstance(inner, Mapping) else {}


def to_esri_polygon(geo: Any) -> dict:
    """
    Parameters
    ----------
    geo : dict
        GeoJSON Polygon, or ``{"geometry": <Polygon>}``.

    Returns
    -------
    dict  ``{"rings": <coordinates>, "spatialReference": {"wkid": 4326}}``

    Raises
    ------
    UnsupportedGeometryError when the resolved type is not "Polygon".
    """
    g = _resolve(geo)
    if g.get("type") != "Polygon":
        raise UnsupportedGeometryError(g.get("type"))
    return {"rings": g.get("coordinates"), "spatialReference": dict(WGS84)}
