import uvicorn
from dotenv import load_dotenv

load_dotenv()

# Module loggers bind at import, so structlog must be configured first
from infrastructure.logging import configure_logging  # noqa: E402

configure_logging()

from server import server  # noqa: E402

server_app = server.handler


def main():
    """Serve the application with uvicorn."""
    uvicorn.run("main:server_app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
