import argparse
import asyncio
import sys
from pathlib import Path

from orphanage_form.attachments.exceptions import AttachmentError
from orphanage_form.attachments.file_loader import FileLoader
from orphanage_form.config.settings import Settings
from orphanage_form.form.models import SubmissionOutcome
from orphanage_form.form.session import build_form_session
from orphanage_form.logging.logger import Log
from orphanage_form.presentation.messages import get_catalog


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="orphanage-form",
        description="Register a new orphanage in the remote store.",
    )
    parser.add_argument("--name", default="")
    parser.add_argument("--description", default="")
    parser.add_argument("--opening-hours", default="")
    parser.add_argument(
        "--closed-on-weekends",
        action="store_true",
        help="The orphanage does not receive visits on weekends.",
    )
    parser.add_argument("--lat", type=float, default=0.0)
    parser.add_argument("--lng", type=float, default=0.0)
    parser.add_argument("images", nargs="*", type=Path)
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> SubmissionOutcome:
    """Fill one form session from the parsed arguments and submit it."""
    messages = get_catalog(settings.ui_locale)
    session = build_form_session(settings, messages)
    async with session:
        session.set_name(args.name)
        session.set_description(args.description)
        session.set_opening_hours(args.opening_hours)
        session.set_open_on_weekends(not args.closed_on_weekends)
        session.click_map(args.lat, args.lng)
        if args.images:
            session.pick_files(FileLoader().load_many(args.images))
        outcome = await session.submit()
        for field_name, message in session.error_state.as_dict().items():
            if message:
                Log.error(f"{field_name}: {message}")
        return outcome


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> one form submission."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_args(argv)
    try:
        outcome = asyncio.run(run(args, settings))
    except AttachmentError as exc:
        Log.error(str(exc))
        return 1
    return 0 if outcome is SubmissionOutcome.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
