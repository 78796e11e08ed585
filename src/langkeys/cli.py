import logging
import os
import sys
from typing import Any, TextIO

import click
from langkeys import aggregator, config as config_module, extractor, loader, report, validator
from langkeys.errors import (
    ConfigError,
    DirectoryUnreadable,
    MalformedTranslationFile,
    NoEligibleFiles,
)
from langkeys.recent import RecentDirectories, YamlFileStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_NO_FILES = 2
EXIT_ERROR = 3
EXIT_NO_KEYS = 4


def load_settings(config_folder: str) -> dict[str, Any]:
    try:
        settings = config_module.load_config(os.path.abspath(config_folder))
    except ConfigError as exc:
        click.echo(str(exc), err=True)
        sys.exit(EXIT_ERROR)
    config_module.setup_logging(settings)
    return settings


def recent_directories(config_folder: str, settings: dict[str, Any]) -> RecentDirectories:
    store_path = os.path.join(os.path.abspath(config_folder), settings["recent"]["file"])
    return RecentDirectories(YamlFileStore(store_path), settings["recent"]["max_items"])


config_folder_option = click.option(
    "--config-folder", default="config", help="Configuration folder path."
)
keys_file_option = click.option(
    "--keys-file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="File with the text to extract keys from (stdin by default).",
)


@click.group()
@click.version_option(package_name="langkeys")
def cli() -> None:
    pass


@cli.command("check")
@click.argument("directory", type=click.Path(file_okay=False))
@keys_file_option
@config_folder_option
@click.option(
    "--view",
    type=click.Choice(["file", "key"]),
    default="file",
    help="Group the results by translation file or by key.",
)
@click.option("--markdown", "markdown_path", type=click.Path(dir_okay=False), help="Also write a markdown report.")
@click.option("--strict/--no-strict", default=None, help="Abort on the first malformed file.")
@click.option("--workers", type=click.IntRange(min=1), help="Number of files read in parallel.")
@click.option("--show-duplicates", is_flag=True, help="List keys that occur more than once in the input.")
def check(
    directory: str,
    keys_file: TextIO,
    config_folder: str,
    view: str,
    markdown_path: str | None,
    strict: bool | None,
    workers: int | None,
    show_duplicates: bool,
) -> None:
    settings = load_settings(config_folder)
    if strict is None:
        strict = bool(settings["validation"]["strict"])
    if workers is None:
        workers = settings["validation"]["workers"]

    extraction = extractor.extract(keys_file.read())
    if not extraction.keys:
        click.echo("No keys found in the input. Keys start with #.", err=True)
        sys.exit(EXIT_NO_KEYS)
    click.echo(f"Found {len(extraction.keys)} keys")
    if show_duplicates:
        for key, count in extraction.duplicates.items():
            click.echo(f"  {key} occurs {count} times")

    directory = os.path.abspath(directory)
    try:
        outcomes = validator.validate_all(
            directory,
            extraction.keys,
            isolate_errors=not strict,
            max_workers=workers,
        )
    except NoEligibleFiles as exc:
        click.echo(str(exc), err=True)
        sys.exit(EXIT_NO_FILES)
    except (DirectoryUnreadable, MalformedTranslationFile) as exc:
        click.echo(f"{exc.code}: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    run = aggregator.summary(outcomes, len(extraction.keys))
    if view == "key":
        key_report = aggregator.by_key(outcomes)
        lines = report.key_lines(key_report)
        markdown = report.key_markdown(key_report)
    else:
        lines = report.file_lines(outcomes, run)
        markdown = report.file_markdown(outcomes)
    for line in lines:
        click.echo(line)
    click.echo(report.summary_line(run))

    if markdown_path:
        logger.info(f"Writing report to {markdown_path}")
        with open(markdown_path, "w", encoding="utf-8") as file:
            file.write(markdown)

    if os.path.isdir(config_folder):
        recent_directories(config_folder, settings).add(directory)
    else:
        logger.debug(f"{config_folder} does not exist, not recording {directory}")

    if run.problem_count or run.files_failed:
        sys.exit(EXIT_PROBLEMS)


@cli.command("keys")
@keys_file_option
def keys(keys_file: TextIO) -> None:
    extraction = extractor.extract(keys_file.read())
    for key in extraction.keys:
        click.echo(key)
    for key, count in extraction.duplicates.items():
        click.echo(f"Duplicate: {key} ({count} times)", err=True)


@cli.command("probe")
@click.argument("directory", type=click.Path(file_okay=False))
def probe(directory: str) -> None:
    try:
        if not loader.has_eligible_files(directory):
            click.echo(f"No lang_*.json files found in {directory}", err=True)
            sys.exit(EXIT_NO_FILES)
        files = loader.list_eligible_files(directory)
    except DirectoryUnreadable as exc:
        click.echo(str(exc), err=True)
        sys.exit(EXIT_ERROR)
    for name in files:
        click.echo(name)


@cli.command("recent")
@config_folder_option
@click.option("--clear", is_flag=True, help="Forget all recent directories.")
def recent(config_folder: str, clear: bool) -> None:
    settings = load_settings(config_folder)
    directories = recent_directories(config_folder, settings)
    if clear:
        directories.clear()
        return
    for directory in directories.items():
        click.echo(directory)
