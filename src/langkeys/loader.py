"""Locate and decode ``lang_<locale>.json`` translation files.

File format invariant: each file holds one JSON object whose *first*
property maps a locale identifier to the flat translation dictionary::

    {"en": {"#menu.title": "Main menu", "#menu.quit": ""}}

Only that first property is read. :func:`json.loads` keeps object members in
source order, which is what makes "first" well defined here.
"""
import json
import logging
import pathlib
from typing import Any

from langkeys.errors import DirectoryUnreadable, MalformedTranslationFile

logger = logging.getLogger(__name__)

LANG_FILE_PREFIX = "lang_"
LANG_FILE_SUFFIX = ".json"
# Reserved names that match the pattern but hold no translations
IGNORED_LANG_FILES = ("lang_longlish.json", "lang_comment.json")


def is_eligible(filename: str) -> bool:
    return (
        filename.startswith(LANG_FILE_PREFIX)
        and filename.endswith(LANG_FILE_SUFFIX)
        and filename not in IGNORED_LANG_FILES
    )


def locale_of(filename: str) -> str:
    return filename[len(LANG_FILE_PREFIX) : -len(LANG_FILE_SUFFIX)]


def list_eligible_files(directory: str) -> list[str]:
    """Return eligible file names in the order the filesystem lists them."""
    try:
        entries = [
            entry.name
            for entry in pathlib.Path(directory).iterdir()
            if entry.is_file()
        ]
    except OSError as ex:
        raise DirectoryUnreadable(directory, ex.strerror or str(ex)) from ex

    files = [name for name in entries if is_eligible(name)]
    logger.debug(f"Eligible files in {directory}: {files}")
    return files


def has_eligible_files(directory: str) -> bool:
    return bool(list_eligible_files(directory))


def decode_dictionary(filename: str, document: Any) -> dict[str, str]:
    if not isinstance(document, dict):
        raise MalformedTranslationFile(
            filename, f"expected a JSON object, got {type(document).__name__}"
        )
    if not document:
        raise MalformedTranslationFile(filename, "the top level object is empty")

    langid, translations = next(iter(document.items()))
    if not isinstance(translations, dict):
        raise MalformedTranslationFile(
            filename, f'"{langid}" does not hold a JSON object'
        )
    for key, value in translations.items():
        if not isinstance(value, str):
            raise MalformedTranslationFile(
                filename,
                f'value of "{key}" is {type(value).__name__}, expected a string',
            )
    return translations


def load_dictionary(directory: str, filename: str) -> dict[str, str]:
    file = pathlib.Path(directory) / filename
    logger.debug(f"Parsing {file}")
    try:
        # utf-8-sig drops a leading byte order mark if an editor added one
        document = json.loads(file.read_text("utf-8-sig"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as ex:
        raise MalformedTranslationFile(filename, str(ex)) from ex
    return decode_dictionary(filename, document)
