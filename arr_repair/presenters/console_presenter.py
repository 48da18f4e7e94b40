"""Console presenter for CLI output."""

from arr_repair.models import MatchedItem, RepairResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_matched_items(self, items: list[MatchedItem]) -> None:
        """Display the stuck downloads found in the queue."""
        print(f"\nStuck downloads ({len(items)}):")
        print("=" * 60)

        for i, item in enumerate(items, 1):
            entry = item.queue_entry
            print(f"{i:2d}. [{entry.id}] {entry.title} ({entry.episode})")
            print(f"      release: {item.history_record.source_title}")

    def show_repair_result(self, result: RepairResult) -> None:
        """Display the result of a repair run."""
        print("\nRepair Complete:")
        print(f"  Stuck downloads found: {result.candidates_found}")
        print(f"  Files renamed: {result.files_renamed}")
        print(f"  Queue entries cleared: {result.entries_cleared}")
        print(f"  Time elapsed: {result.elapsed_time:.1f}s")

        if result.skipped:
            print("\nSkipped (will be retried on the next run):")
            for reason in result.skipped:
                print(f"  {reason}")

        if result.errors:
            print("\nErrors:")
            for error in result.errors:
                print(f"  {error}")
