from dataclasses import dataclass, field


@dataclass
class Extraction:
    keys: list[str]
    duplicates: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationOutcome:
    file: str
    missing_keys: tuple[str, ...] = ()
    empty_translations: tuple[str, ...] = ()
    error: str | None = None

    @property
    def problem_count(self) -> int:
        return len(self.missing_keys) + len(self.empty_translations)

    def is_clean(self) -> bool:
        return self.error is None and self.problem_count == 0


@dataclass
class KeyCentricReport:
    missing_keys: dict[str, list[str]] = field(default_factory=dict)
    empty_translations: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class RunSummary:
    key_count: int
    files_checked: int
    files_clean: int
    files_failed: int
    problem_count: int
    valid_keys: dict[str, int] = field(default_factory=dict)
