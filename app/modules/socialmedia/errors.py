"""Social media module exceptions."""


class SocialMediaError(Exception):
    """Base class for social media button errors."""


class SocialMediaUsageError(SocialMediaError, ValueError):
    """Raised when the public API is called with invalid arguments.

    This is the only error the module lets escape; every locale or network
    problem degrades to a default locale instead.
    """
