"""Entry point: runs every demo in order on one event loop"""

import asyncio
import logging
import time

from solid_demos.config import settings
from solid_demos.demos import DEMOS
from solid_demos.infrastructure.observability.logging import log_demo, setup_logging


async def run_demos() -> None:
    """
    Run each demo once, in order.

    Control returns to the event loop after every demo so fire-and-forget
    tasks get a chance to run. Their output may land anywhere after the
    demo that started them.
    """
    for demo in DEMOS:
        start_time = time.time()
        demo()
        log_demo(demo.__name__, (time.time() - start_time) * 1000)
        await asyncio.sleep(0)


def main() -> None:
    setup_logging(settings.log_level)
    logging.info("Starting demos", extra={"demo_count": len(DEMOS)})
    asyncio.run(run_demos())


if __name__ == "__main__":
    main()
