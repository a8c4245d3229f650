"""
Campaign Client

Request construction for a marketing-campaign client:
- Profile subscription URL
- Profile request JSON body (device/user attributes)
- Message tracking URL (impression, click and open interactions)

Transport, retries and response handling live outside this package.
"""

from .models import CampaignState, ProfileAttributes
from .protocols import (
    AssemblyFailureError,
    CampaignRequestError,
    CampaignStateProtocol,
    LogSinkProtocol,
    MissingConfigurationError,
)
from .url_builder import build_profile_body, build_profile_url, build_tracking_url

__version__ = "1.0.0"
__service__ = "campaign_client"

__all__ = [
    "CampaignState",
    "ProfileAttributes",
    "CampaignStateProtocol",
    "LogSinkProtocol",
    "CampaignRequestError",
    "MissingConfigurationError",
    "AssemblyFailureError",
    "build_profile_url",
    "build_profile_body",
    "build_tracking_url",
]
