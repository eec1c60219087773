import argparse
import asyncio
import sys
from pathlib import Path

from wordcloud_client.api.factory import ApiClientFactory
from wordcloud_client.config.settings import Settings
from wordcloud_client.controller import LifecycleController, Phase
from wordcloud_client.display.viewport import ViewportTracker
from wordcloud_client.export.clipboard import PyperclipClipboard
from wordcloud_client.export.exporter import serialize_word_counts
from wordcloud_client.files.exceptions import FileSelectionError
from wordcloud_client.files.selection import FileSelection
from wordcloud_client.jobs.models import JobResult, JobStatus
from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications import LogNotifier


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordcloud-client",
        description="Upload a text file for word counting and retrieve the result.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="upload a .txt file and track the job")
    upload.add_argument("path", type=Path)
    upload.add_argument("--fetch", action="store_true", help="fetch and print the result")
    upload.add_argument("--copy", action="store_true", help="copy the result JSON")

    status = commands.add_parser("status", help="track an existing job until it finishes")
    status.add_argument("identifier")

    result = commands.add_parser("result", help="fetch the result of an existing job")
    result.add_argument("identifier")
    result.add_argument("--copy", action="store_true", help="copy the result JSON")
    return parser


def build_controller(settings: Settings, selection: FileSelection) -> LifecycleController:
    """Build a LifecycleController with all required adapters."""
    return LifecycleController(
        api=ApiClientFactory.create(settings),
        notifier=LogNotifier(settings.notification_life_ms),
        clipboard=PyperclipClipboard(),
        settings=settings,
        selection=selection,
        viewport=ViewportTracker(),
    )


def print_result(controller: LifecycleController, result: JobResult) -> None:
    print(serialize_word_counts(result))
    params = controller.render_params()
    Log.info(
        f"Render input: {len(params.word_counts)} words, "
        f"{params.width:.0f}x{params.height}"
    )


async def run(args: argparse.Namespace, settings: Settings) -> int:
    selection = FileSelection(settings)
    controller = build_controller(settings, selection)
    try:
        if args.command == "upload":
            return await _run_upload(controller, selection, args)
        if args.command == "status":
            controller.publish_identifier(args.identifier)
            status = await controller.wait_for_status()
            return 0 if status is JobStatus.COMPLETED else 1
        controller.publish_identifier(args.identifier)
        return await _run_fetch(controller, copy=args.copy)
    finally:
        await controller.aclose()


async def _run_upload(
    controller: LifecycleController, selection: FileSelection, args: argparse.Namespace
) -> int:
    try:
        selection.select(args.path)
    except FileSelectionError as exc:
        Log.error(str(exc))
        return 1
    if await controller.upload() is None:
        return 1
    status = await controller.wait_for_status()
    if status is not JobStatus.COMPLETED:
        return 1
    if not (args.fetch or args.copy):
        return 0
    return await _run_fetch(controller, copy=args.copy)


async def _run_fetch(controller: LifecycleController, *, copy: bool) -> int:
    result = await controller.fetch_result()
    if result is None:
        return 1
    if result.has_data:
        print_result(controller, result)
        if copy and not controller.copy_result():
            return 1
    return 0 if controller.snapshot().phase is Phase.READY else 1


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> controller -> command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    try:
        return asyncio.run(run(args, settings))
    except KeyboardInterrupt:
        Log.info("Interrupted, shutting down")
        return 130


if __name__ == "__main__":
    sys.exit(main())
