"""Dev entry point: ``python -m backend.run``."""

import os

import uvicorn

from siteforge.config import get_settings


def main() -> None:
    settings = get_settings()
    # SITEFORGE_ENV=production turns off auto-reload
    dev = os.environ.get("SITEFORGE_ENV", "development") == "development"
    uvicorn.run("backend.main:app", host="0.0.0.0", port=settings.port, reload=dev)


if __name__ == "__main__":
    main()
