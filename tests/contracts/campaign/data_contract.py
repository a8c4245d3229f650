"""
Campaign Client Data Contract

Test data factories for the campaign request builders.

This is the SINGLE SOURCE OF TRUTH for campaign request test data.
All tests MUST use these factories.
"""

import random
import string
from typing import Dict, Optional
from uuid import uuid4

from campaign_client.models import CampaignState


# =============================================================================
# TEST DATA FACTORY
# =============================================================================

class CampaignRequestTestDataFactory:
    """Factory for generating test data for campaign request tests

    Usage:
        factory = CampaignRequestTestDataFactory()
        state = factory.make_state()
        params = factory.make_tracking_params()
    """

    TRACKING_ACTIONS = ["impression", "click", "open"]

    @staticmethod
    def make_server() -> str:
        """Generate campaign server hostname"""
        return f"mcias-{uuid4().hex[:8]}.campaign.example.com"

    @staticmethod
    def make_pkey() -> str:
        """Generate campaign property key"""
        return uuid4().hex

    @staticmethod
    def make_ecid() -> str:
        """Generate Experience Cloud ID (38 digits)"""
        return "".join(random.choices(string.digits, k=38))

    @staticmethod
    def make_broad_log_id() -> str:
        """Generate broadlog id"""
        return str(random.randint(100000, 999999))

    @staticmethod
    def make_delivery_id() -> str:
        """Generate delivery id"""
        return format(random.randint(0x10000, 0xFFFFF), "x")

    @classmethod
    def make_action(cls) -> str:
        """Pick a tracking action"""
        return random.choice(cls.TRACKING_ACTIONS)

    @classmethod
    def make_state(
        cls,
        server: Optional[str] = None,
        pkey: Optional[str] = None,
        ecid: Optional[str] = None,
    ) -> CampaignState:
        """Generate a fully configured campaign state"""
        return CampaignState(
            server=server or cls.make_server(),
            pkey=pkey or cls.make_pkey(),
            ecid=ecid or cls.make_ecid(),
        )

    @staticmethod
    def make_profile_attributes(**overrides: str) -> Dict[str, str]:
        """Generate caller-supplied profile attributes"""
        attributes = {
            "deviceName": "iPhone15,2",
            "appId": "com.example.app",
            "locale": "en-US",
            "pushToken": uuid4().hex,
        }
        attributes.update(overrides)
        return attributes

    @classmethod
    def make_tracking_params(cls, **overrides: str) -> Dict[str, str]:
        """Generate keyword arguments for build_tracking_url"""
        params = {
            "host": cls.make_server(),
            "broad_log_id": cls.make_broad_log_id(),
            "delivery_id": cls.make_delivery_id(),
            "action": cls.make_action(),
            "ecid": cls.make_ecid(),
        }
        params.update(overrides)
        return params
