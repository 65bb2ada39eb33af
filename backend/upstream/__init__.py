"""
Outbound HTTP helpers, one module per upstream:

    mapi    – government mapping provider (address, parcel, intersect)
    arcgis  – municipal ArcGIS map servers (layer list, spatial query)

Each call returns a tagged `RelayBody` ready for `relay.to_response()`.
"""
from . import arcgis, mapi

__all__ = ["arcgis", "mapi"]
