"""Option schemas for the social media buttons."""

from typing import Annotated, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SocialMediaOptions(BaseModel):
    """Site-wide options of a SocialMedia object.

    ``twitter`` and ``twitter_related`` are accepted for ``x_account`` and
    ``x_related``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    x_account: Annotated[
        Optional[str],
        Field(
            default=None,
            min_length=1,
            max_length=15,
            pattern=r"^[A-Za-z0-9_]+$",
            validation_alias=AliasChoices("x_account", "x", "twitter"),
            description="X account name used by the follow and tweet buttons",
            json_schema_extra={"example": "nigelhorne"},
        ),
    ] = None
    x_related: Annotated[
        Optional[Tuple[str, str]],
        Field(
            default=None,
            validation_alias=AliasChoices("x_related", "twitter_related"),
            description="Name and description of a related X account",
        ),
    ] = None
    host_name: Annotated[
        Optional[str],
        Field(
            default=None,
            min_length=1,
            description="Host name liked or shared by the Facebook buttons",
            json_schema_extra={"example": "www.example.com"},
        ),
    ] = None
    protocol: Literal["http", "https"] = "https"


class ButtonOptions(BaseModel):
    """Buttons requested for one rendering.

    ``twitter_follow_button`` and ``twitter_tweet_button`` are accepted for
    the X buttons.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    facebook_like_button: bool = False
    facebook_share_button: bool = False
    linkedin_share_button: bool = False
    x_follow_button: bool = Field(
        default=False,
        validation_alias=AliasChoices("x_follow_button", "twitter_follow_button"),
    )
    x_tweet_button: bool = Field(
        default=False,
        validation_alias=AliasChoices("x_tweet_button", "twitter_tweet_button"),
    )
    reddit_button: bool = False
    google_plusone: bool = False
    align: Optional[Literal["left", "center", "right", "justify"]] = None

    @property
    def wants_facebook(self) -> bool:
        return self.facebook_like_button or self.facebook_share_button

    @property
    def wants_x(self) -> bool:
        return self.x_follow_button or self.x_tweet_button

    @property
    def wants_any(self) -> bool:
        return (
            self.wants_facebook
            or self.wants_x
            or self.linkedin_share_button
            or self.reddit_button
            or self.google_plusone
        )
