"""Console output for entries and efficiency reports."""

from sleep.domain.metrics import record_efficiency
from sleep.domain.models import WindowSummary
from sleep.tracker import EfficiencyReport, EntryResult


def print_entry_result(result: EntryResult) -> None:
    """Confirmation after a save, plus any advisory warnings."""
    if result.issues:
        print("\nHeads up, some answers look unusual (saved anyway):")
        for issue in result.issues:
            print(f"  - {issue.field}: {issue.reason} ({issue.value!r})")

    print("\n✓ Sleep data saved successfully!")
    print(f"Entry ID: {result.entry_id}")
    print(f"Sleep Efficiency: {result.efficiency:.1f}%")
    print(f"Total Sleep: {result.total_sleep_hours:.1f} hours")
    print(f"Sleep vs Target Window: {result.percent_of_target:.1f}%")


def print_window_summary(summary: WindowSummary, leading_newline: bool = False) -> None:
    prefix = "\n" if leading_newline else ""
    if not summary.has_data:
        print(f"{prefix}Last {summary.days} days: No data available")
        return
    print(f"{prefix}Last {summary.days} days ({summary.entry_count} entries):")
    print(f"  Average Sleep Efficiency: {summary.average_efficiency:.1f}%")
    print(f"  Average Sleep Quality: {summary.average_quality:.1f}/5")
    print(f"  Average Sleep Duration: {summary.average_sleep_hours:.1f} hours")
    print(
        "  Average Sleep Duration incl. Naps: "
        f"{summary.average_sleep_hours_including_naps:.1f} hours"
    )


def print_efficiency_report(report: EfficiencyReport) -> None:
    print("\n--- Sleep Efficiency Averages ---")
    for i, summary in enumerate(report.windows):
        print_window_summary(summary, leading_newline=i > 0)

    if report.recent_entries:
        print("\n--- Recent Entries Summary ---")
        for i, entry in enumerate(report.recent_entries, start=1):
            print(
                f"{i}. {entry.entry_date.isoformat()} - "
                f"{entry.total_sleep_minutes / 60:.1f} hrs sleep, "
                f"{record_efficiency(entry):.1f}% efficiency, "
                f"quality {entry.sleep_quality_score}/5"
            )
