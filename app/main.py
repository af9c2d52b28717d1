import uvicorn
from dotenv import load_dotenv

from core.config import settings
from server import server

load_dotenv()

server_app = server.handler


def main() -> None:
    """Run the localization API with uvicorn."""
    host, _, port = settings.server.BACKEND_URL.rsplit("/", 1)[-1].partition(":")
    uvicorn.run(
        "main:server_app",
        host=host or "127.0.0.1",
        port=int(port or 8000),
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
