"""Run the API with uvicorn: ``python -m commitai``."""

from __future__ import annotations

import uvicorn

from commitai.core.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None keeps the handlers installed by setup_logging().
    uvicorn.run("commitai.api.app:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
