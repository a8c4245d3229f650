"""
Campaign Client Constants

Fixed URL templates and payload keys used by the request builders.
"""

LOG_TAG = "URL+Campaign"

HTTPS_SCHEME = "https"

# profile url: https://{server}/rest/head/mobileAppV5/{pkey}/subscriptions/{ecid}
PROFILE_URL_PATH = "/rest/head/mobileAppV5/{pkey}/subscriptions/{ecid}"

# tracking url: https://{host}/r?id={broadLogId},{deliveryId},{action}&mcId={ecid}
TRACKING_URL_PATH = "/r"
TRACKING_ID_PARAM = "id"
TRACKING_ECID_PARAM = "mcId"
TRACKING_ID_SEPARATOR = ","

# Profile body keys
EXPERIENCE_CLOUD_ID_KEY = "marketingCloudId"
PUSH_PLATFORM_KEY = "pushPlatform"
PUSH_PLATFORM_APNS = "apns"
