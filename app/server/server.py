from fastapi import FastAPI, Request

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import bind_request_context, get_module_logger
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(title="Social Media Buttons", lifespan=lifespan)
setup_rate_limiter(handler)


@handler.middleware("http")
async def logging_middleware(request: Request, call_next):
    with bind_request_context(
        correlation_id=request.headers.get("X-Correlation-ID"),
        request_path=request.url.path,
        request_method=request.method,
    ) as correlation_id:
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


handler.include_router(api_router)
