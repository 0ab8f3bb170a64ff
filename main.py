# main.py
import os

import uvicorn

from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.path import database_url
from web import create_app


def main() -> None:
    setup_logging()
    run_migrations(database_url())

    host = os.getenv("BHIMA_HOST", "127.0.0.1")
    port = int(os.getenv("BHIMA_PORT", "8080"))
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
