from __future__ import annotations

import logging
import os

import uvicorn


def main() -> None:
    log_level = (os.getenv("LOG_LEVEL") or "info").strip().lower()
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(
        "src.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
