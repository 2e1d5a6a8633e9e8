"""Base Pydantic model with strict defaults for contractkit configs.

All contractkit config schemas inherit from this base to ensure consistent
validation behavior across parameter, user, and internal configs.
"""

from pydantic import BaseModel, ConfigDict


class ContractKitBaseModel(BaseModel):
    """Base model for all contractkit configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        str_strip_whitespace=True,# Strip whitespace from strings
    )
