"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat keys with uppercase aliases (BYPASS_TIMEOUT_CHECK ->
bypass_timeout_check) as well as nested sections. Users only specify what
they want to override from ParamConfig.
"""

from typing import Optional
from pydantic import Field
from contractkit.schemas.base import ContractKitBaseModel


class UserTimingConfig(ContractKitBaseModel):
    """User-facing timing config."""
    bypass_timeout_check: Optional[bool] = None


class UserNamingConfig(ContractKitBaseModel):
    """User-facing naming config."""
    default_value_name: Optional[str] = None
    default_collection_name: Optional[str] = None
    invariant_name_prefix: Optional[str] = None


class UserConfig(ContractKitBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(BYPASS_TIMEOUT_CHECK="yes")
        internal = resolve_config(ParamConfig(), user_cfg)
    """

    # Flat aliases
    bypass_timeout_check: Optional[bool] = Field(None, alias="BYPASS_TIMEOUT_CHECK")
    default_value_name: Optional[str] = Field(None, alias="DEFAULT_VALUE_NAME")
    default_collection_name: Optional[str] = Field(None, alias="DEFAULT_COLLECTION_NAME")
    invariant_name_prefix: Optional[str] = Field(None, alias="INVARIANT_NAME_PREFIX")

    # Nested overrides
    timing: Optional[UserTimingConfig] = None
    naming: Optional[UserNamingConfig] = None

    model_config = ContractKitBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        timing = {}
        if self.bypass_timeout_check is not None:
            timing["bypass_timeout_check"] = self.bypass_timeout_check
        if self.timing is not None:
            timing.update(self.timing.model_dump(exclude_none=True))
        if timing:
            overrides["timing"] = timing

        naming = {}
        if self.default_value_name is not None:
            naming["default_value_name"] = self.default_value_name
        if self.default_collection_name is not None:
            naming["default_collection_name"] = self.default_collection_name
        if self.invariant_name_prefix is not None:
            naming["invariant_name_prefix"] = self.invariant_name_prefix
        if self.naming is not None:
            naming.update(self.naming.model_dump(exclude_none=True))
        if naming:
            overrides["naming"] = naming

        return overrides
