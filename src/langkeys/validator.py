from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Any

from langkeys import extractor, loader
from langkeys.classes import ValidationOutcome
from langkeys.errors import MalformedTranslationFile, NoEligibleFiles

logger = logging.getLogger(__name__)


def is_empty_translation(value: Any) -> bool:
    # Only "" counts; 0 or False are real values
    return isinstance(value, str) and not value


def validate(
    keys: Sequence[str], translations: Mapping[str, Any]
) -> tuple[list[str], list[str]]:
    """Split ``keys`` into missing and empty ones, keeping their order."""
    missing_keys = []
    empty_translations = []
    for key in keys:
        if key not in translations:
            missing_keys.append(key)
        elif is_empty_translation(translations[key]):
            empty_translations.append(key)
    return missing_keys, empty_translations


def validate_file(
    directory: str, filename: str, keys: Sequence[str], *, isolate_errors: bool = True
) -> ValidationOutcome:
    try:
        translations = loader.load_dictionary(directory, filename)
    except MalformedTranslationFile as ex:
        if not isolate_errors:
            raise
        logger.error(str(ex))
        return ValidationOutcome(filename, error=ex.reason)

    missing_keys, empty_translations = validate(keys, translations)
    if missing_keys or empty_translations:
        logger.error(
            f"Found {len(missing_keys) + len(empty_translations)} issues in {filename}"
        )
    else:
        logger.info(f"No issues found in {filename}")
    return ValidationOutcome(filename, tuple(missing_keys), tuple(empty_translations))


def validate_all(
    directory: str,
    keys: Sequence[str],
    *,
    isolate_errors: bool = True,
    max_workers: int | None = None,
) -> list[ValidationOutcome]:
    files = loader.list_eligible_files(directory)
    if not files:
        raise NoEligibleFiles(directory)

    logger.info(f"Validating {len(keys)} keys against {len(files)} files")
    keys = tuple(keys)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map() yields in submission order, so outcomes follow the listing order
        outcomes = executor.map(
            lambda filename: validate_file(
                directory, filename, keys, isolate_errors=isolate_errors
            ),
            files,
        )
        return list(outcomes)


def run_validation(
    directory: str,
    raw_key_text: str,
    *,
    isolate_errors: bool = True,
    max_workers: int | None = None,
) -> list[ValidationOutcome]:
    extraction = extractor.extract(raw_key_text)
    return validate_all(
        directory,
        extraction.keys,
        isolate_errors=isolate_errors,
        max_workers=max_workers,
    )
