from collections import defaultdict
from collections.abc import Sequence

from langkeys.classes import KeyCentricReport, RunSummary, ValidationOutcome


def by_file(outcomes: Sequence[ValidationOutcome]) -> Sequence[ValidationOutcome]:
    return outcomes


def by_key(outcomes: Sequence[ValidationOutcome]) -> KeyCentricReport:
    """Regroup outcomes as key -> files where that key fails.

    A key missing from one file and empty in another shows up in both maps.
    """
    missing_keys: dict[str, list[str]] = defaultdict(list)
    empty_translations: dict[str, list[str]] = defaultdict(list)
    for outcome in outcomes:
        for key in outcome.missing_keys:
            missing_keys[key].append(outcome.file)
        for key in outcome.empty_translations:
            empty_translations[key].append(outcome.file)
    return KeyCentricReport(dict(missing_keys), dict(empty_translations))


def summary(outcomes: Sequence[ValidationOutcome], key_count: int) -> RunSummary:
    loaded = [outcome for outcome in outcomes if outcome.error is None]
    return RunSummary(
        key_count=key_count,
        files_checked=len(outcomes),
        files_clean=sum(1 for outcome in loaded if outcome.is_clean()),
        files_failed=len(outcomes) - len(loaded),
        problem_count=sum(outcome.problem_count for outcome in outcomes),
        valid_keys={
            outcome.file: key_count - outcome.problem_count for outcome in loaded
        },
    )
