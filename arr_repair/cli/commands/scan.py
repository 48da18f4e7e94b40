"""CLI command for previewing a repair run."""

from arr_repair.exceptions import ArrRepairException
from arr_repair.presenters import ConsolePresenter

from .common import build_config, build_processor


def scan_command(args) -> int:
    """Execute the scan subcommand (dry run).

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        config = build_config(args, dry_run=True)
    except ArrRepairException as e:
        presenter.show_error(f"Configuration error: {e}")
        return 1

    processor = build_processor(config, presenter)
    result = processor.process()
    presenter.show_repair_result(result)

    return 0 if result.success else 1
