"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema ContractChecker sees. It is fully validated,
explicit, and frozen.
"""

from pydantic import ConfigDict, Field
from contractkit.schemas.base import ContractKitBaseModel


class InternalTimingConfig(ContractKitBaseModel):
    """Runtime timing configuration."""
    bypass_timeout_check: bool


class InternalNamingConfig(ContractKitBaseModel):
    """Runtime naming configuration."""
    default_value_name: str = Field(min_length=1)
    default_collection_name: str = Field(min_length=1)
    invariant_name_prefix: str


class InternalConfig(ContractKitBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
        checker = ContractChecker(config)
        checker.bypass_timeout_check  # seeded from config.timing

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    """

    timing: InternalTimingConfig
    naming: InternalNamingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
