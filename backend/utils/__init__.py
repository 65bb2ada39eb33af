"""
Expose the config loader and relay helpers so downstream code can do:

    from backend.utils import load_config, parse_body
"""
from .paths import ConfigError, GatewayConfig, load_config
from .relay import JsonBody, RelayBody, TextBody, error_response, parse_body, to_response

__all__ = [
    "ConfigError", "GatewayConfig", "load_config",
    "JsonBody", "TextBody", "RelayBody", "parse_body", "to_response", "error_response",
]
