"""
Sub‑packages:
    utils     – config loader + upstream body relay
    upstream  – outbound calls (mapping provider, ArcGIS)
    api       – FastAPI routers, geometry translation, allow‑list
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
