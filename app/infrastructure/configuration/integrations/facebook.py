"""Facebook integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class FacebookSettings(IntegrationSettings):
    """Facebook SDK configuration.

    The SDK is served per locale from
    ``<FACEBOOK_SDK_BASE_URL>/<locale>/<FACEBOOK_SDK_RESOURCE>``. Facebook
    answers unknown locales with HTTP 200 and an error text, so the marker
    phrase is configurable.

    Environment Variables:
        FACEBOOK_SDK_BASE_URL: Base URL of the locale-specific SDK
        FACEBOOK_SDK_RESOURCE: Resource path probed under each locale
        FACEBOOK_SDK_VERSION: Graph API version passed to the SDK
        FACEBOOK_APP_ID: Facebook application ID
        FACEBOOK_DEFAULT_LOCALE: Locale used when the visitor's is unsupported
        FACEBOOK_PROBE_TIMEOUT_SECONDS: Timeout of the locale probe
        FACEBOOK_INVALID_LOCALE_MARKER: Body text signalling an unknown locale
    """

    FACEBOOK_SDK_BASE_URL: str = Field(
        default="http://connect.facebook.com", alias="FACEBOOK_SDK_BASE_URL"
    )
    FACEBOOK_SDK_RESOURCE: str = Field(default="sdk.js", alias="FACEBOOK_SDK_RESOURCE")
    FACEBOOK_SDK_VERSION: str = Field(default="v2.8", alias="FACEBOOK_SDK_VERSION")
    FACEBOOK_APP_ID: str = Field(default="953901534714390", alias="FACEBOOK_APP_ID")
    FACEBOOK_DEFAULT_LOCALE: str = Field(
        default="en_US", alias="FACEBOOK_DEFAULT_LOCALE"
    )
    FACEBOOK_PROBE_TIMEOUT_SECONDS: float = Field(
        default=10, alias="FACEBOOK_PROBE_TIMEOUT_SECONDS"
    )
    FACEBOOK_INVALID_LOCALE_MARKER: str = Field(
        default="is not a valid locale", alias="FACEBOOK_INVALID_LOCALE_MARKER"
    )
