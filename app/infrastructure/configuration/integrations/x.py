"""X (formerly Twitter) integration settings."""

from typing import Optional, Tuple

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class XSettings(IntegrationSettings):
    """X account configuration used by the follow and tweet buttons.

    Environment Variables:
        X_ACCOUNT: Account name shown in follow/tweet buttons
        X_RELATED: "name,description" of a related account

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        account = settings.x.X_ACCOUNT
        ```
    """

    X_ACCOUNT: Optional[str] = Field(default=None, alias="X_ACCOUNT")
    X_RELATED: Optional[str] = Field(default=None, alias="X_RELATED")

    @property
    def related_account(self) -> Optional[Tuple[str, str]]:
        """Split X_RELATED into (name, description).

        Returns:
            Tuple of name and description, or None if unset or malformed.
        """
        if not self.X_RELATED or "," not in self.X_RELATED:
            return None
        name, description = self.X_RELATED.split(",", 1)
        return name.strip(), description.strip()
