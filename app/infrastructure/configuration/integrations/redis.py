"""Redis integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class RedisSettings(IntegrationSettings):
    """Redis/Valkey connection used by the shared locale support cache.

    Environment Variables:
        REDIS_HOST: Redis endpoint hostname
        REDIS_PORT: Redis port (default: 6379)
        REDIS_DB: Database index (default: 0)
        REDIS_SOCKET_TIMEOUT: Socket timeout in seconds (default: 5)
    """

    REDIS_HOST: str = Field(default="localhost", alias="REDIS_HOST")
    REDIS_PORT: int = Field(default=6379, alias="REDIS_PORT")
    REDIS_DB: int = Field(default=0, alias="REDIS_DB")
    REDIS_SOCKET_TIMEOUT: float = Field(default=5, alias="REDIS_SOCKET_TIMEOUT")
