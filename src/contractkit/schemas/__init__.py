"""Pydantic configuration schemas for contractkit.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from contractkit.schemas.resolve import resolve_config
from contractkit.schemas.internal import InternalConfig
from contractkit.schemas.param import ParamConfig
from contractkit.schemas.user import UserConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
]
