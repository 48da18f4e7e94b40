"""Null presenter for testing (no output)."""

from arr_repair.models import MatchedItem, RepairResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        pass

    def show_success(self, message: str) -> None:
        pass

    def show_warning(self, message: str) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_matched_items(self, items: list[MatchedItem]) -> None:
        pass

    def show_repair_result(self, result: RepairResult) -> None:
        pass
