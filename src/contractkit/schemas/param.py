"""ParamConfig: Expert defaults for contract checking.

Single source of truth for defaults. Runtime code NEVER reads from
ParamConfig directly - ContractChecker only receives InternalConfig.
"""

from pydantic import Field
from contractkit.schemas.base import ContractKitBaseModel


class TimingConfig(ContractKitBaseModel):
    """Time budget check configuration."""
    bypass_timeout_check: bool = Field(
        False, description="Skip every time budget check (debugger, slow CI)"
    )


class NamingConfig(ContractKitBaseModel):
    """Names used in failure messages when the caller gives none."""
    default_value_name: str = Field("value", min_length=1)
    default_collection_name: str = Field("collection", min_length=1)
    invariant_name_prefix: str = "Invariant-"


class ParamConfig(ContractKitBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is the base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg)

    ContractChecker only sees InternalConfig.
    """

    timing: TimingConfig = Field(default_factory=TimingConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
