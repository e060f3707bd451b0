#!filepath: seximal/cli.py
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from seximal import __version__
from seximal.common.forms import SeximalForm
from seximal.config.app_config import AppConfig
from seximal.engines.form_engine import describe, render
from seximal.pipeline import SeximalPipeline
from seximal.utils.datetime_utils import DateTimeUtils
from seximal.utils.errors import UserInputError
from seximal.utils.logger import init_logging, logs

app = typer.Typer(help="Misalian seximal clock CLI", no_args_is_help=True)

err_console = Console(stderr=True)

WHEN_HELP = (
    "What time to display. Defaults to the current time. "
    "Examples: 00:34:59, 12:34:59 AM, 4pm, 6h 45m, 8h24m36s, "
    "ISO-8601 or ctime date-times (the date is ignored)."
)


def _fail(err: Exception) -> typer.Exit:
    logs.warning(f"[CLI] rejected input: {err}")
    err_console.print(f"[red]error:[/red] {escape(str(err))}")
    return typer.Exit(code=2)


def _setup(config: Optional[Path], when: Optional[str], local: bool, tz: Optional[str]) -> tuple:
    """
    配置 → 日志 → pipeline（命令行参数优先于配置文件）
    给了 WHEN 字面量时不读时钟，配置里的时区不参与校验
    """
    cfg = AppConfig.load(path=str(config) if config else None)
    init_logging(cfg.log)

    if tz:
        DateTimeUtils.zone(tz)  # 命令行显式给出的时区始终校验

    if when is not None:
        return cfg, SeximalPipeline()

    if tz is None and not local:
        tz, local = cfg.clock.timezone, cfg.clock.local

    pipeline = SeximalPipeline(clock=DateTimeUtils.clock(local=local, tz=tz))
    return cfg, pipeline


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def show(
    when: Optional[str] = typer.Argument(None, help=WHEN_HELP),
    basic: bool = typer.Option(
        False, "--basic", "-b",
        help="Display the current snap: seven zero-padded digits, "
             "the extended form without delimiters (20:34:05.0 -> 2034050).",
    ),
    snap: bool = typer.Option(False, "--snap", help="Alias of --basic."),
    span: bool = typer.Option(
        False, "--span", "-s",
        help="Display the current span: three zero-padded digits, 000 to 555.",
    ),
    local: bool = typer.Option(False, "--local", "-l", help="Use system time zone instead of UTC."),
    tz: Optional[str] = typer.Option(None, "--tz", help="Use a named IANA time zone."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file."),
):
    """
    输出 seximal 时间（默认 extended 形式 LP:LL:MT.SN）
    """
    if span and (basic or snap):
        raise typer.BadParameter("--span cannot be combined with --basic/--snap", param_hint="'--span'")

    try:
        cfg, pipeline = _setup(config, when, local, tz)

        if span:
            form = SeximalForm.SPAN
        elif basic or snap:
            form = SeximalForm.SNAPSHOT
        else:
            form = cfg.clock.form

        out = pipeline.run(when, form)
    except (UserInputError, FileNotFoundError) as e:
        raise _fail(e)

    print(out)


@app.command()
def units(
    when: Optional[str] = typer.Argument(None, help=WHEN_HELP),
    local: bool = typer.Option(False, "--local", "-l", help="Use system time zone instead of UTC."),
    tz: Optional[str] = typer.Option(None, "--tz", help="Use a named IANA time zone."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file."),
):
    """
    按单位展示 lapse / lull / moment / snap / span 及三种形式
    """
    try:
        _, pipeline = _setup(config, when, local, tz)
        tod = pipeline.resolve(when)
        reading = pipeline.converter.process(tod)
    except (UserInputError, FileNotFoundError) as e:
        raise _fail(e)

    table = Table(title=f"{tod} -> {reading.ticks} snaps")
    table.add_column("unit")
    table.add_column("decimal", justify="right")
    table.add_column("seximal", justify="right")
    for row in describe(reading):
        table.add_row(row.name, str(row.value), row.seximal)

    console = Console()
    console.print(table)
    for form in SeximalForm:
        console.print(f"{form.value:<9} {render(reading, form)}")


def main():
    app()


if __name__ == "__main__":
    main()

# python -m seximal.cli show 08:24:36 --basic
