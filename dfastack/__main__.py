import logging
import os

from dfastack.commands import main

if os.environ.get("DFASTACK_DEBUG"):
    LEVEL = logging.DEBUG
else:
    level_name = os.environ.get("DFASTACK_LOG_LEVEL", "INFO")
    LEVEL = logging._nameToLevel.get(level_name.upper(), logging.INFO)

logging.basicConfig(format="%(asctime)s - %(levelname)s - %(name)s - %(message)s", level=LEVEL)


def run() -> None:
    main(prog="dfastack")


if __name__ == "__main__":
    run()
