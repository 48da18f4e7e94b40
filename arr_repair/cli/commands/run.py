"""CLI command for repairing stuck downloads."""

import time

from arr_repair.exceptions import ArrRepairException
from arr_repair.presenters import ConsolePresenter

from .common import build_config, build_processor


def run_command(args) -> int:
    """Execute the run subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    presenter.show_info("Arr Repair - Stuck Download Repair Tool")
    presenter.show_info("=" * 50)

    try:
        config = build_config(
            args,
            command_retries=args.retries,
            rename_after_fix=args.rename or None,
        )
    except ArrRepairException as e:
        presenter.show_error(f"Configuration error: {e}")
        return 1

    presenter.show_info(f"Server: {config.server_url} ({config.server_type})")
    presenter.show_info(f"Download folder: {config.download_folder}\n")

    deadline = time.monotonic() + args.timeout if args.timeout else None

    processor = build_processor(config, presenter)
    result = processor.process(deadline=deadline)
    presenter.show_repair_result(result)

    return 0 if result.success else 1
