"""
Run summary: flattens per-image-set results into one structure and renders
it as console text or as a JSON-serializable dict.
"""

from dataclasses import dataclass

from .reconcile import ImageSetSyncResult, SyncOutcome


@dataclass(frozen=True)
class SyncSummary:
    updated: tuple[str, ...] = ()
    missing: tuple[tuple[str, str], ...] = ()      # (filename, image set)
    unassigned: tuple[str, ...] = ()               # image set names
    skipped: tuple[str, ...] = ()
    rewritten_manifests: tuple[str, ...] = ()      # image set names


def summarize(results: dict[str, dict[str, ImageSetSyncResult]]) -> SyncSummary:
    """Aggregate catalog name -> image set name -> result in a single pass."""
    updated: list[str] = []
    missing: list[tuple[str, str]] = []
    unassigned: list[str] = []
    skipped: list[str] = []
    rewritten: list[str] = []

    for catalog_result in results.values():
        for image_set, result in catalog_result.items():
            flagged = False
            for entry in result.entries:
                if entry.outcome is SyncOutcome.UPDATED:
                    updated.append(entry.filename)
                elif entry.outcome is SyncOutcome.MISSING:
                    missing.append((entry.filename, image_set))
                elif entry.outcome is SyncOutcome.SKIPPED:
                    skipped.append(entry.filename)
                elif entry.outcome is SyncOutcome.UNASSIGNED and not flagged:
                    unassigned.append(image_set)
                    flagged = True
            if result.manifest_updated:
                rewritten.append(image_set)

    return SyncSummary(
        updated=tuple(updated),
        missing=tuple(missing),
        unassigned=tuple(unassigned),
        skipped=tuple(skipped),
        rewritten_manifests=tuple(rewritten),
    )


def format_summary(summary: SyncSummary) -> str:
    """Human-readable report: updated, missing, unassigned, skipped."""
    lines: list[str] = []

    if summary.updated:
        lines.append(f"\n{len(summary.updated)} files were updated:")
        lines.extend(f"  - {f}" for f in summary.updated)
    else:
        lines.append("\nNo files were updated…")

    if summary.missing:
        lines.append(f"\n{len(summary.missing)} files were not found/updated:")
        lines.extend(f"  - {f} / {image_set}" for f, image_set in summary.missing)

    if summary.unassigned:
        lines.append(
            f"\n{len(summary.unassigned)} image sets contain unassigned files, "
            f"you might want to check them out:"
        )
        lines.extend(f"  - {image_set}" for image_set in summary.unassigned)

    if summary.skipped:
        lines.append(f"\n{len(summary.skipped)} files were not modified and skipped:")
        lines.extend(f"  - {f}" for f in summary.skipped)

    return "\n".join(lines)


def summary_to_dict(summary: SyncSummary, source_dir: str, destination_dir: str) -> dict:
    """JSON document for --report."""
    return {
        "source": source_dir,
        "destination": destination_dir,
        "clean": not summary.missing and not summary.unassigned,
        "counts": {
            "updated": len(summary.updated),
            "missing": len(summary.missing),
            "unassigned": len(summary.unassigned),
            "skipped": len(summary.skipped),
        },
        "updated": list(summary.updated),
        "missing": [{"filename": f, "image_set": i} for f, i in summary.missing],
        "unassigned": list(summary.unassigned),
        "skipped": list(summary.skipped),
        "rewritten_manifests": list(summary.rewritten_manifests),
    }
