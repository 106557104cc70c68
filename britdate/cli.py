"""Command-line interface for britdate."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from .config import BritDateConfig, create_default_config, load_config, validate_config
from .date_range import format_date_range
from .formatter import (
    format_date_with_weekday,
    format_date_with_weekday_and_time,
    format_long_date,
    format_long_date_with_time,
    format_month_year,
    format_short_date,
    format_short_date_with_time,
    format_time,
)
from .parser import parse_lenient_date
from .utc import (
    to_iso8601_date,
    to_iso8601_datetime,
    to_rfc822_datetime,
    to_rfc850_datetime,
    to_unix_timestamp,
)

DATE_STYLES = {
    "long": (format_long_date, format_long_date_with_time),
    "short": (format_short_date, format_short_date_with_time),
    "short-no-year": (
        lambda moment: format_short_date(moment, include_year=False),
        lambda moment: format_short_date_with_time(moment, include_year=False),
    ),
    "weekday": (format_date_with_weekday, format_date_with_weekday_and_time),
    "month-year": (format_month_year, None),
}

UTC_FORMATS = {
    "iso-date": lambda moment, region: to_iso8601_date(moment),
    "iso-datetime": to_iso8601_datetime,
    "rfc822": to_rfc822_datetime,
    "rfc850": to_rfc850_datetime,
    "unix": lambda moment, region: str(to_unix_timestamp(moment, region)),
}


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="JSON configuration file (default: built-in UK settings)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_file: Optional[Path]) -> None:
    """britdate: British English house-style dates and times."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        if config_file:
            ctx.obj = load_config(config_file)
        else:
            ctx.obj = validate_config(create_default_config())
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


def _parse_or_exit(text: str, config: BritDateConfig) -> datetime:
    """Parse date text or stop with an error message."""
    moment = parse_lenient_date(text, config.region)
    if moment is None:
        click.echo(f"❌ Not recognised: {text}", err=True)
        sys.exit(1)
    return moment


@main.command()
@click.argument("text")
@click.option(
    "--style",
    type=click.Choice(list(DATE_STYLES)),
    default="weekday",
    show_default=True,
    help="House style to use",
)
@click.option(
    "--with-time",
    is_flag=True,
    help="Add the time after the date (not with month-year)",
)
@click.pass_obj
def date(config: BritDateConfig, text: str, style: str, with_time: bool) -> None:
    """Format a date in house style, eg Monday 1 January 2004."""
    date_only, date_and_time = DATE_STYLES[style]
    if with_time and date_and_time is None:
        raise click.UsageError(f"--with-time cannot be used with --style {style}")
    moment = _parse_or_exit(text, config)
    click.echo(date_and_time(moment) if with_time else date_only(moment))


@main.command()
@click.argument("text")
@click.pass_obj
def time(config: BritDateConfig, text: str) -> None:
    """Format a time in house style, eg 10.15am or 12 noon."""
    click.echo(format_time(_parse_or_exit(text, config)))


@main.command("range")
@click.argument("start")
@click.argument("end")
@click.option(
    "--start-time/--no-start-time", default=None, help="Show the start time"
)
@click.option("--end-time/--no-end-time", default=None, help="Show the end time")
@click.option(
    "--short/--long",
    default=None,
    help="Use short month names and leave out the day name",
)
@click.pass_obj
def date_range(
    config: BritDateConfig,
    start: str,
    end: str,
    start_time: Optional[bool],
    end_time: Optional[bool],
    short: Optional[bool],
) -> None:
    """
    Describe the period from START to END in house style.

    Defaults for each option come from the range section of the configuration.
    """
    style = config.range_style
    click.echo(
        format_date_range(
            _parse_or_exit(start, config),
            _parse_or_exit(end, config),
            show_start_time=style.show_start_time if start_time is None else start_time,
            show_end_time=style.show_end_time if end_time is None else end_time,
            use_short_form=style.use_short_form if short is None else short,
        )
    )


@main.command()
@click.argument("text")
@click.pass_obj
def parse(config: BritDateConfig, text: str) -> None:
    """Parse a date written in British English and show what was understood."""
    moment = _parse_or_exit(text, config)
    click.echo(moment.isoformat())


@main.command()
@click.argument("text")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(UTC_FORMATS)),
    default="iso-datetime",
    show_default=True,
    help="International format to use",
)
@click.pass_obj
def utc(config: BritDateConfig, text: str, output_format: str) -> None:
    """Format a date and time in an international format."""
    moment = _parse_or_exit(text, config)
    click.echo(UTC_FORMATS[output_format](moment, config.region))


@main.command()
@click.option("--create", is_flag=True, help="Create default configuration template")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default="britdate.json",
    help="Output path",
)
def config(create: bool, output: Path) -> None:
    """
    Configuration management commands.

    Use --create to generate a default configuration template.
    """
    if create:
        with open(output, "w") as f:
            json.dump(create_default_config(), f, indent=2)

        click.echo(f"✅ Created default configuration: {output}")
    else:
        click.echo("Use --create to generate default configuration")


if __name__ == "__main__":
    main()
