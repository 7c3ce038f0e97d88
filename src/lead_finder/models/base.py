"""
Base models and configuration for Lead Finder.

This module provides the foundation for all data models using Pydantic v2.
Request and response bodies use camelCase on the wire while the Python
attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict


class BaseLeadModel(BaseModel):
    """
    Base model for all Lead Finder data structures.

    Provides consistent configuration and JSON serialization for the
    HTTP layer.
    """

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Accept both the wire alias and the attribute name
        populate_by_name=True,
        # Ignore unknown keys coming from clients or external APIs
        extra="ignore",
        # Validate default values
        validate_default=True,
    )
