"""Presenter protocol for output abstraction."""

from typing import Protocol

from arr_repair.models import MatchedItem, RepairResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, tests, etc).

    This protocol abstracts all output operations, allowing the same
    repair logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_matched_items(self, items: list[MatchedItem]) -> None:
        """Display the stuck queue entries paired with their history.

        Args:
            items: Matched items in queue order
        """
        ...

    def show_repair_result(self, result: RepairResult) -> None:
        """Display the result of a repair run.

        Args:
            result: The repair result to display
        """
        ...
