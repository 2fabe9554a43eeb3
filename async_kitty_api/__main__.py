import asyncio
import sys

from logging_config import setup_logger

from .cli import main

if __name__ == "__main__":
    setup_logger()
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(130)
