"""Factory functions for creating SocialMedia objects."""

from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver, LocaleSignals, RegionTag
from infrastructure.locale_support import RemoteLocaleSupportCache
from modules.socialmedia.schemas import SocialMediaOptions
from modules.socialmedia.selector import SupportedLocaleSelector
from modules.socialmedia.social_media import SocialMedia


def create_social_media(
    signals: LocaleSignals,
    settings: Settings,
    resolver: LocaleResolver,
    support: RemoteLocaleSupportCache,
    options: Optional[SocialMediaOptions] = None,
) -> SocialMedia:
    """Create a SocialMedia object configured from settings.

    X account options fall back to X_ACCOUNT / X_RELATED when not given.

    Args:
        signals: Locale signals detected for the visitor.
        settings: Settings instance.
        resolver: Shared locale resolver.
        support: Shared Facebook locale support lookups.
        options: Per-request options.

    Returns:
        SocialMedia: Object for one page render.
    """
    options = options or SocialMediaOptions()
    if options.x_account is None and settings.x.X_ACCOUNT:
        options = options.model_copy(
            update={
                "x_account": settings.x.X_ACCOUNT,
                "x_related": options.x_related or settings.x.related_account,
            }
        )

    selector = SupportedLocaleSelector(
        resolver=resolver,
        support=support,
        default_tag=RegionTag.parse(settings.facebook.FACEBOOK_DEFAULT_LOCALE),
    )
    return SocialMedia(
        signals=signals,
        selector=selector,
        options=options,
        facebook_app_id=settings.facebook.FACEBOOK_APP_ID,
        facebook_sdk_version=settings.facebook.FACEBOOK_SDK_VERSION,
    )
