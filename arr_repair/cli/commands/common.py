"""Helpers shared by the CLI subcommands."""

from arr_repair.config import ArrRepairConfig, load_config_from_env
from arr_repair.orchestration import RepairProcessor
from arr_repair.presenters import ConsolePresenter
from arr_repair.services import create_client


def build_config(args, **overrides) -> ArrRepairConfig:
    """Create the run configuration from the environment and parsed arguments.

    Raises:
        ConfigError: If the configuration is incomplete or invalid
    """
    config = load_config_from_env(
        server_url=args.url,
        api_key=args.api_key,
        server_type=args.server_type,
        download_folder=args.download_folder,
        **overrides,
    )
    config.validate()
    return config


def build_processor(config: ArrRepairConfig, presenter: ConsolePresenter) -> RepairProcessor:
    """Wire the services of a repair run."""
    return RepairProcessor(config=config, api=create_client(config), presenter=presenter)
