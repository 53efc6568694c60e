#!/usr/bin/env python3
"""
GifLoad - trending GIF feed
Headless entry point: loads pages the way the grid screen would and prints them.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from gifload.components import StateView
from gifload.config import AppSettings
from gifload.core.di_container import AppContainer
from gifload.domain import Error, SessionState, Success
from gifload.managers import PaginationController
from gifload.utils import should_load_more

logger = logging.getLogger("GifLoad.Main")


async def run_session(
    controller: PaginationController,
    pages: int,
    threshold: int = 3,
) -> SessionState:
    """Mount the controller, then scroll to the end until ``pages`` pages are shown."""
    unsubscribe = controller.state.subscribe(
        lambda state: logger.debug(f"State -> {type(state).__name__}")
    )
    try:
        controller.load_initial()
        await controller.wait_idle()

        for _ in range(pages - 1):
            state = controller.state.value
            if not isinstance(state, Success) or not controller.has_more:
                break
            last_visible = len(state.items) - 1
            if not should_load_more(last_visible, len(state.items), state, threshold):
                break
            controller.load_more()
            await controller.wait_idle()

        return controller.state.value
    finally:
        unsubscribe()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gifload", description="Browse trending GIFs page by page"
    )
    parser.add_argument("--config", help="Path to settings.yml")
    parser.add_argument(
        "--pages", type=int, default=1, help="Number of pages to load (default: 1)"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = AppSettings.load(args.config)
    if not settings.api.api_key:
        logger.warning("No API key configured; set GIPHY_API_KEY or api.api_key")

    container = AppContainer.create(settings=settings)
    controller = container.create_controller()
    view = StateView(settings.display, controller.index_of)

    logger.info("GifLoad starting...")

    async def session() -> SessionState:
        try:
            return await run_session(
                controller,
                max(args.pages, 1),
                settings.pagination.prefetch_threshold,
            )
        finally:
            controller.close()

    try:
        final_state = asyncio.run(session())
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    for line in view.render(final_state):
        print(line)
    return 1 if isinstance(final_state, Error) else 0


if __name__ == "__main__":
    sys.exit(main())
