# cli/main.py

"""
Entry point for the student records CLI.

Parses command-line overrides, configures logging, wires the service client, record
store, form controller, session, and orchestrator together, and runs the Manage
Students screen on an asyncio event loop.
"""

import argparse
import asyncio
import logging

import core.formatters as formatters
from cli import students_menu
from core.client import StudentServiceClient
from core.config import Settings, get_settings
from core.form_controller import FormController
from core.orchestrator import RequestOrchestrator
from core.record_store import RecordStore
from core.retry import RetryPolicy
from core.session import Session

logger = logging.getLogger(__name__)


def parse_args(settings: Settings, argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage student records over HTTP")
    parser.add_argument(
        "--api-url",
        dest="api_url",
        help="Base URL of the student collection service",
        default=settings.STUDENTS_API_URL,
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
        default=settings.LOG_LEVEL,
    )

    return parser.parse_args(argv)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_orchestrator(
    client: StudentServiceClient,
    settings: Settings,
) -> RequestOrchestrator:
    retry_policy = RetryPolicy(
        attempts=settings.STUDENTS_RETRY_ATTEMPTS,
        delay=settings.STUDENTS_RETRY_DELAY,
    )

    if retry_policy.attempts > 1:
        logger.info(
            "Retrying failed calls up to %d attempts, %.1fs apart",
            retry_policy.attempts,
            retry_policy.delay,
        )

    return RequestOrchestrator(
        client=client,
        store=RecordStore(client, retry_policy),
        form=FormController(),
        session=Session(),
        retry_policy=retry_policy,
    )


async def run_app(api_url: str, settings: Settings) -> None:
    async with StudentServiceClient(api_url) as client:
        orchestrator = build_orchestrator(client, settings)
        await students_menu.run(orchestrator)


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    args = parse_args(settings, argv)

    configure_logging(args.log_level)
    logger.info("Using student service at %s", args.api_url)

    try:
        asyncio.run(run_app(args.api_url.rstrip("/"), settings))

    except (KeyboardInterrupt, EOFError):
        pass

    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")


if __name__ == "__main__":
    main()
