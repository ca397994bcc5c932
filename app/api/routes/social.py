"""Social media button routes.

Renders the requested buttons in the visitor's language. The visitor's
locale is detected from the Accept-Language header and their country.
"""

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import HTMLResponse

from api.dependencies.rate_limits import client_ip, get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    LocaleResolverDep,
    LocaleSourceDep,
    LocaleSupportDep,
    SettingsDep,
)
from modules.socialmedia import ButtonOptions, SocialMediaOptions, create_social_media

router = APIRouter(tags=["Social Media"])
limiter = get_limiter()
logger = get_module_logger()


@router.get("/social-media", response_class=HTMLResponse)
@limiter.limit("30/minute")
def get_social_media(
    request: Request,
    settings: SettingsDep,
    resolver: LocaleResolverDep,
    support: LocaleSupportDep,
    source: LocaleSourceDep,
    facebook_like_button: bool = False,
    facebook_share_button: bool = False,
    linkedin_share_button: bool = False,
    x_follow_button: bool = False,
    x_tweet_button: bool = False,
    reddit_button: bool = False,
    google_plusone: bool = False,
    align: Optional[Literal["left", "center", "right", "justify"]] = None,
    x_account: Optional[str] = None,
):
    """Render social media buttons as an HTML fragment.

    Returns 204 when no button is requested and 400 when a requested button
    cannot be rendered (e.g., X buttons without an account).
    """
    signals = source.signals(request.headers, client_ip(request))
    try:
        options = SocialMediaOptions(
            x_account=x_account,
            host_name=request.url.hostname,
            protocol="https" if request.url.scheme == "https" else "http",
        )
        social_media = create_social_media(
            signals=signals,
            settings=settings,
            resolver=resolver,
            support=support,
            options=options,
        )
        html = social_media.render(
            ButtonOptions(
                facebook_like_button=facebook_like_button,
                facebook_share_button=facebook_share_button,
                linkedin_share_button=linkedin_share_button,
                x_follow_button=x_follow_button,
                x_tweet_button=x_tweet_button,
                reddit_button=reddit_button,
                google_plusone=google_plusone,
                align=align,
            )
        )
    except ValueError as e:
        logger.warning("social_media_render_rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e)) from e

    if html is None:
        return Response(status_code=204)
    return HTMLResponse(content=html)


@router.get("/locale")
@limiter.limit("30/minute")
def get_locale(
    request: Request,
    settings: SettingsDep,
    resolver: LocaleResolverDep,
    support: LocaleSupportDep,
    source: LocaleSourceDep,
):
    """Return the visitor's region tag and the Facebook SDK locale."""
    signals = source.signals(request.headers, client_ip(request))
    social_media = create_social_media(
        signals=signals,
        settings=settings,
        resolver=resolver,
        support=support,
    )
    return {
        "region_tag": str(social_media.region_tag()),
        "facebook_locale": str(social_media.facebook_locale()),
    }
