from __future__ import annotations

from .models import DeletionOutcome, DeletionState, Partition, RotateConfig


def settings_lines(config: RotateConfig) -> list[str]:
    return [
        f"SOURCE PATH ....... {config.source}",
        f"SILENT ............ {str(config.silent).lower()}",
        f"DRY RUN ........... {str(config.dry_run).lower()}",
        f"PATTERN ........... {config.pattern}",
        f"KEEP NUMBER ....... {config.keep}",
        f"ORDER ............. {config.order}",
    ]


def report(part: Partition, silent: bool = False) -> str:
    """
    Human-readable summary of a partition: how many files go, then the
    delete list and the keep list. Empty when silent.
    """
    if silent:
        return ""

    lines = [f"Number of files to delete: {len(part.to_delete)}", ""]

    lines.append("List of files to delete:")
    lines.extend(f"\t{e.path}" for e in part.to_delete)
    lines.append("")

    lines.append("List of files to keep:")
    lines.extend(f"\t{e.path}" for e in part.to_keep)

    return "\n".join(lines)


def nothing_to_rotate(config: RotateConfig, matched: int) -> str:
    return (
        f"Nothing to rotate: {matched} file(s) matching the pattern "
        f"{config.pattern} in the source path {config.source}."
    )


def outcome_line(outcome: DeletionOutcome) -> str | None:
    """Progress line for one apply step; None for steps that stay quiet."""
    if outcome.state == DeletionState.DELETED:
        return f"Deleting file: {outcome.entry.path}"
    if outcome.state == DeletionState.WOULD_DELETE:
        return f"Would delete file: {outcome.entry.path}"
    return None
