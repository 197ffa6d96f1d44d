"""Command-line runner: `conceptguide` starts uvicorn on HOST:PORT."""
from __future__ import annotations

import uvicorn

from conceptguide.core import config


def main() -> None:
    uvicorn.run(
        "conceptguide.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
