"""Text renderings of validation results.

Both the console output and the markdown report come in two views: grouped
by file (the default) and grouped by key.
"""
from collections.abc import Sequence

from langkeys import aggregator, loader
from langkeys.classes import KeyCentricReport, RunSummary, ValidationOutcome


def file_lines(outcomes: Sequence[ValidationOutcome], run: RunSummary) -> list[str]:
    lines = []
    for outcome in aggregator.by_file(outcomes):
        if outcome.error is not None:
            lines.append(f"{outcome.file}: failed to load ({outcome.error})")
            continue
        if outcome.is_clean():
            lines.append(f"{outcome.file}: all {run.key_count} keys OK")
            continue
        lines.append(
            f"{outcome.file}: {outcome.problem_count} problem keys, "
            f"{run.valid_keys[outcome.file]} valid keys"
        )
        for key in outcome.missing_keys:
            lines.append(f'  "{key}" -> Key missing')
        for key in outcome.empty_translations:
            lines.append(f'  "{key}" -> Translation empty')
    return lines


def key_lines(report: KeyCentricReport) -> list[str]:
    lines = []
    for title, files_by_key in (
        ("Missing keys", report.missing_keys),
        ("Empty translations", report.empty_translations),
    ):
        if not files_by_key:
            continue
        lines.append(f"{title} ({len(files_by_key)}):")
        for key, files in files_by_key.items():
            lines.append(f"  {key}: {', '.join(files)}")
    if not lines:
        lines.append("All keys are present and translated in every file")
    return lines


def summary_line(run: RunSummary) -> str:
    line = (
        f"Checked {run.key_count} keys in {run.files_checked} files: "
        f"{run.files_clean} clean, {run.problem_count} problems"
    )
    if run.files_failed:
        line += f", {run.files_failed} failed to load"
    return line


def file_markdown(outcomes: Sequence[ValidationOutcome]) -> str:
    markdown = ""
    for outcome in aggregator.by_file(outcomes):
        markdown += f"## {outcome.file} ({loader.locale_of(outcome.file)})\n"
        if outcome.error is not None:
            markdown += f"**Failed to load: {outcome.error}**\n\n"
            continue
        if outcome.is_clean():
            markdown += "No issues found\n\n"
            continue
        markdown += "| Key | Issue |\n| ------- | --------- |\n"
        for key in outcome.missing_keys:
            markdown += f"| `{key}` | Key missing |\n"
        for key in outcome.empty_translations:
            markdown += f"| `{key}` | Translation empty |\n"
        markdown += "\n"
    return markdown


def key_markdown(report: KeyCentricReport) -> str:
    markdown = ""
    for title, files_by_key in (
        ("Missing keys", report.missing_keys),
        ("Empty translations", report.empty_translations),
    ):
        if not files_by_key:
            continue
        markdown += f"## {title}\n| Key | Files |\n| ------- | --------- |\n"
        for key, files in files_by_key.items():
            markdown += f"| `{key}` | {', '.join(files)} |\n"
        markdown += "\n"
    return markdown or "No issues found\n"
