import logging
import os
from typing import Optional

DEFAULT_NOISY_LIBS = {"httpx": logging.WARNING, "aiosqlite": logging.WARNING, "sqlalchemy.engine": logging.WARNING}


def setup_logging(noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", logging.INFO),
        handlers=[handler],
        force=True,
    )

    for lib, level in (noisy_libs if noisy_libs is not None else DEFAULT_NOISY_LIBS).items():
        logging.getLogger(lib).setLevel(level)
