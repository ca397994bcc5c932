"""Social media buttons rendered in the visitor's language.

Main components:
- social_media: SocialMedia, the request-scoped object rendering buttons
- selector: SupportedLocaleSelector choosing the Facebook SDK locale
- schemas: SocialMediaOptions and ButtonOptions
- factory: create_social_media building objects from settings
"""

from modules.socialmedia.errors import SocialMediaError, SocialMediaUsageError
from modules.socialmedia.factory import create_social_media
from modules.socialmedia.schemas import ButtonOptions, SocialMediaOptions
from modules.socialmedia.selector import DEFAULT_PLATFORM_TAG, SupportedLocaleSelector
from modules.socialmedia.social_media import SocialMedia
from modules.socialmedia.state import ResolverState

__all__ = [
    "SocialMedia",
    "SocialMediaOptions",
    "ButtonOptions",
    "SupportedLocaleSelector",
    "DEFAULT_PLATFORM_TAG",
    "ResolverState",
    "SocialMediaError",
    "SocialMediaUsageError",
    "create_social_media",
]
