from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from blossom_server.config import Settings
from blossom_server.http import create_app
from blossom_server.observability import configure_logging


def main() -> None:
    load_dotenv()
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)

    app = create_app(settings)
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    main()
