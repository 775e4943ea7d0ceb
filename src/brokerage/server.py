"""Server entry point: runs the API under uvicorn."""

import uvicorn

from brokerage.config.settings import get_settings
from brokerage.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
