"""Run the API with uvicorn: ``python -m agency_api``."""
from __future__ import annotations

import uvicorn

from agency_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("agency_api.app:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
