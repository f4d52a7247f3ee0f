"""
Run the analytics API locally with `python -m backend`.

Serves on port 8001 with auto-reload; debug logs from the analytics
services are shown outside production.
"""
import logging

import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(level=logging.INFO if settings.is_production else logging.DEBUG)
    uvicorn.run("backend.main:app", host="0.0.0.0", port=8001, reload=not settings.is_production)
