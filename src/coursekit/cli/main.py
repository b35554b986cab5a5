import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from coursekit import __version__
from coursekit.core.chapter import Chapter
from coursekit.core.course import Course
from coursekit.core.errors import CourseKitError
from coursekit.core.tag import Tag
from coursekit.infrastructure.config import (
    LOG_LEVELS,
    CourseKitConfig,
    get_config,
    get_config_file_locations,
    write_example_config,
)
from coursekit.infrastructure.logging_setup import setup_logging
from coursekit.serialization.contract import dumps_contract
from coursekit.serialization.files import CourseFileFormat, load_course, save_course
from coursekit.serialization.xml_format import dumps

logger = logging.getLogger(__name__)


def output_format_for(path: Path, cfg: CourseKitConfig) -> CourseFileFormat:
    """Return the format for ``path``, falling back to the configured default."""
    try:
        return CourseFileFormat.from_path(path)
    except ValueError:
        logger.debug(f"No known suffix on {path}, using {cfg.serialization.default_format}")
        return CourseFileFormat(cfg.serialization.default_format)


def _load(path: Path) -> Course:
    try:
        return load_course(path)
    except (CourseKitError, ValidationError, ValueError) as e:
        raise click.ClickException(f"Cannot read course from {path}: {e}") from e


def _save(course: Course, path: Path, cfg: CourseKitConfig) -> None:
    try:
        save_course(
            course,
            path,
            file_format=output_format_for(path, cfg),
            xml_indent=cfg.serialization.xml_indent,
            json_indent=cfg.serialization.json_indent,
        )
    except (CourseKitError, ValidationError, OSError) as e:
        raise click.ClickException(f"Cannot write course to {path}: {e}") from e


@click.group()
@click.version_option(__version__, prog_name="coursekit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to the configured level)",
)
@click.pass_context
def cli(ctx, log_level):
    """Create, inspect, compare and convert course files."""
    ctx.ensure_object(dict)
    cfg = get_config(reload=True)
    setup_logging(log_level or cfg.logging.log_level)
    ctx.obj["CONFIG"] = cfg


@cli.command()
@click.argument("name")
@click.argument("short-name")
@click.argument("description")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to write the course to (prints XML to stdout if omitted)",
)
@click.option("--language", "-l", help="Course language, e.g. 'de-DE'")
@click.option("--thumbnail", help="URI of the thumbnail image")
@click.option("--tag", "tags", multiple=True, help="Tag term (may be repeated)")
@click.option("--chapter", "chapters", multiple=True, help="Chapter name (may be repeated)")
@click.pass_context
def new(ctx, name, short_name, description, output, language, thumbnail, tags, chapters):
    """Create a new course."""
    cfg: CourseKitConfig = ctx.obj["CONFIG"]
    try:
        course = Course.create(
            name,
            short_name,
            description,
            language=language or cfg.course.default_language,
        )
        course.thumbnail_image = thumbnail
        for term in tags:
            course.add_tag(Tag(term))
        for chapter_name in chapters:
            course.add_chapter(Chapter(chapter_name))
    except CourseKitError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(dumps(course, indent=cfg.serialization.xml_indent))
    else:
        _save(course, output, cfg)
        click.echo(f"Created course {course.short_name} ({course.id}) in {output}", err=True)


@cli.command()
@click.argument(
    "input-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument("output-file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--bump-version",
    is_flag=True,
    help="Increment the course version in the converted file",
)
@click.pass_context
def convert(ctx, input_file, output_file, bump_version):
    """Convert a course file between the XML and JSON formats."""
    cfg: CourseKitConfig = ctx.obj["CONFIG"]
    course = _load(input_file)
    if bump_version:
        course.bump_version()
    _save(course, output_file, cfg)
    click.echo(f"Converted {input_file} -> {output_file}", err=True)


@cli.command()
@click.argument(
    "course-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Print the JSON contract instead")
@click.pass_context
def show(ctx, course_file, as_json):
    """Show a summary of a course file."""
    cfg: CourseKitConfig = ctx.obj["CONFIG"]
    course = _load(course_file)
    if as_json:
        click.echo(dumps_contract(course, indent=cfg.serialization.json_indent))
        return

    console = Console()
    table = Table(title=f"{course.name} ({course.short_name})", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Id", str(course.id))
    table.add_row("Version", str(course.version))
    table.add_row("Language", course.language)
    table.add_row("Description", course.description)
    table.add_row("Thumbnail", course.thumbnail_image or "(none)")
    table.add_row("Tags", _describe_list(course.tags, str))
    table.add_row("Chapters", _describe_list(course.chapters, lambda c: c.name))
    console.print(table)


def _describe_list(items, describe) -> str:
    if items is None:
        return "(absent)"
    if not items:
        return "(empty)"
    return "\n".join(f"{i}. {describe(item)}" for i, item in enumerate(items, 1))


@cli.command()
@click.argument("first", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("second", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def diff(ctx, first, second):
    """Compare two course files.

    Exits with status 0 if the courses are equal and 1 otherwise.
    """
    first_course = _load(first)
    second_course = _load(second)
    changed = first_course.changed_fields(second_course)
    if not changed:
        click.echo("Courses are equal")
        return
    click.echo("Courses differ in:")
    for field_name in changed:
        click.echo(f"  {field_name}")
    ctx.exit(1)


@cli.group()
def config():
    """Manage coursekit configuration."""


@config.command(name="show")
def config_show():
    """Show current configuration values."""
    cfg = get_config(reload=True)

    click.echo("Current coursekit configuration:")
    click.echo("=" * 60)

    click.echo("\n[Course]")
    click.echo(f"  default_language: {cfg.course.default_language}")

    click.echo("\n[Serialization]")
    click.echo(f"  xml_indent: {cfg.serialization.xml_indent!r}")
    click.echo(f"  json_indent: {cfg.serialization.json_indent}")
    click.echo(f"  default_format: {cfg.serialization.default_format}")

    click.echo("\n[Logging]")
    click.echo(f"  log_level: {cfg.logging.log_level}")


@config.command(name="init")
@click.option(
    "--location",
    type=click.Choice(["project", "user", "system"]),
    default="project",
    help="Where to create the configuration file",
)
def config_init(location):
    """Create an example configuration file."""
    try:
        config_path = write_example_config(location)
    except FileExistsError as e:
        raise click.ClickException(str(e)) from e
    except PermissionError as e:
        raise click.ClickException(f"Permission denied creating config file: {e}") from e
    click.echo(f"Created configuration file: {config_path}")


@config.command(name="locate")
def config_locate():
    """Show configuration file locations."""
    for kind, path in get_config_file_locations().items():
        status = "exists" if path.exists() else "not found"
        click.echo(f"{kind:8} {path} ({status})")


if __name__ == "__main__":
    cli()
