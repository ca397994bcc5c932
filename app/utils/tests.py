from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI


def create_test_app(
    routers, dependency_overrides: Optional[Dict[Callable, Callable[[], Any]]] = None
) -> FastAPI:
    """
    Create a FastAPI test application serving the given routers.

    Args:
        routers: A router or list of routers to include.
        dependency_overrides: Optional provider -> replacement mapping, e.g.
            {get_locale_support: lambda: fake_support}.

    Returns:
        FastAPI: An app with rate limiting configured like the server's.

    Example:
        app = create_test_app(social.router, {get_settings: lambda: settings})
    """
    app = FastAPI()

    from api.dependencies.rate_limits import setup_rate_limiter

    setup_rate_limiter(app)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if dependency_overrides:
        app.dependency_overrides.update(dependency_overrides)

    return app
