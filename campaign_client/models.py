"""
Campaign Client Data Models

Read-only state consumed by the request builders.
"""

from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.config.campaign_config import CampaignConfig


# Caller-supplied profile attributes: attribute name -> string value
ProfileAttributes = Mapping[str, str]


class CampaignState(BaseModel):
    """
    Snapshot of the campaign configuration and identity.

    ``None`` means the value was never supplied. Empty strings are kept as-is
    so the builders can report them as missing configuration.
    """

    model_config = ConfigDict(frozen=True)

    server: Optional[str] = Field(None, description="Campaign server hostname")
    pkey: Optional[str] = Field(None, description="Campaign property key")
    ecid: Optional[str] = Field(None, description="Experience Cloud ID")

    @field_validator("server", "pkey", "ecid", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @classmethod
    def from_config(
        cls, config: CampaignConfig, ecid: Optional[str] = None
    ) -> "CampaignState":
        """
        Build a state snapshot from configuration.

        Args:
            config: Campaign configuration
            ecid: Identity override; falls back to the configured identifier

        Returns:
            CampaignState
        """
        return cls(
            server=config.campaign_server,
            pkey=config.campaign_pkey,
            ecid=ecid if ecid is not None else config.experience_cloud_id,
        )
