#!/usr/bin/env python3
"""Campaign configuration

Server, property key and identity used to address the campaign backend.
Values come from the environment; blank values are treated as unset.
"""
import os
from dataclasses import dataclass
from typing import Optional


def _optional(val: Optional[str]) -> Optional[str]:
    if val is None:
        return None
    val = val.strip()
    return val or None


@dataclass(frozen=True)
class CampaignConfig:
    """Campaign backend configuration"""
    campaign_server: Optional[str] = None
    campaign_pkey: Optional[str] = None
    experience_cloud_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'CampaignConfig':
        """Load campaign config from environment variables"""
        return cls(
            campaign_server=_optional(os.getenv("CAMPAIGN_SERVER")),
            campaign_pkey=_optional(os.getenv("CAMPAIGN_PKEY")),
            experience_cloud_id=_optional(os.getenv("EXPERIENCE_CLOUD_ID")),
        )

    @property
    def is_configured(self) -> bool:
        """True when server and property key are both set"""
        return bool(self.campaign_server and self.campaign_pkey)
