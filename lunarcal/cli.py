from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import Config
from .converter import ConversionResult, lunar_to_solar, solar_to_lunar
from .errors import CalendarError
from .festival import special_day
from .lunar import (
    china_month,
    gan_zhi_year,
    leap_days,
    leap_month,
    month_sequence,
    year_days,
)
from .solar import animal_of_year, solar_terms

APP_NAME = "lunarcal"

app = typer.Typer(name=APP_NAME, help="lunarcal: 公历 / 农历转换（1900-2100）")
console = Console()

_state: dict[str, Config] = {}


def _config() -> Config:
    if "config" not in _state:
        _state["config"] = Config.from_env()
    return _state["config"]


@app.callback()
def main(
    env_file: Optional[str] = typer.Option(None, "--env-file", help="指定 .env 配置文件"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
):
    """公历 / 农历互转、干支、节气与节日查询"""
    config = Config.from_env(env_path=env_file)
    _state["config"] = config
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else config.log_level_value,
    )


def _print_result(result: ConversionResult, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    special = special_day(result)
    lines = [
        f"公历: {result.solar_date} {result.weekday_cn}  {result.astro}",
        f"农历: {result.l_year}年 {result.month_cn}{result.day_cn}",
        f"干支: {result.gz_year}年 {result.gz_month}月 {result.gz_day}日  生肖: {result.animal}",
    ]
    if result.is_term:
        lines.append(f"节气: {result.term}")
    if special and special != result.term:
        lines.append(f"节日: {special}")
    title = "今天" if result.is_today else result.solar_date
    console.print(Panel("\n".join(lines), title=title, expand=False))


def _run(convert, as_json: Optional[bool]) -> None:
    if as_json is None:
        as_json = _config().json_output
    try:
        result = convert()
    except CalendarError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)
    _print_result(result, as_json)


@app.command()
def solar(
    year: Optional[int] = typer.Argument(None, help="公历年（1900-2100）"),
    month: Optional[int] = typer.Argument(None, help="公历月"),
    day: Optional[int] = typer.Argument(None, help="公历日"),
    as_json: Optional[bool] = typer.Option(None, "--json/--no-json", help="输出 JSON"),
):
    """公历转农历（不传日期则为今天）"""
    tz = _config().timezone
    _run(lambda: solar_to_lunar(year, month, day, tz=tz), as_json)


@app.command()
def lunar(
    year: int = typer.Argument(..., help="农历年（1900-2100）"),
    month: int = typer.Argument(..., help="农历月（1-12）"),
    day: int = typer.Argument(..., help="农历日（1-30）"),
    leap: bool = typer.Option(False, "--leap", "-l", help="该月为闰月"),
    as_json: Optional[bool] = typer.Option(None, "--json/--no-json", help="输出 JSON"),
):
    """农历转公历"""
    tz = _config().timezone
    _run(lambda: lunar_to_solar(year, month, day, leap, tz=tz), as_json)


@app.command()
def today(
    as_json: Optional[bool] = typer.Option(None, "--json/--no-json", help="输出 JSON"),
):
    """查看今天（按配置的时区）"""
    tz = _config().timezone
    _run(lambda: solar_to_lunar(tz=tz), as_json)


@app.command()
def terms(year: int = typer.Argument(..., help="公历年（1900-2100）")):
    """列出某年的二十四节气日期"""
    try:
        items = solar_terms(year)
    except CalendarError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{year} 年二十四节气")
    table.add_column("序号", justify="right")
    table.add_column("节气")
    table.add_column("日期")
    for i, (name, when) in enumerate(items, start=1):
        table.add_row(str(i), name, when.isoformat())
    console.print(table)


@app.command()
def year(year: int = typer.Argument(..., help="农历年（1900-2100）")):
    """查看农历年概况：干支、生肖、天数、闰月"""
    try:
        total = year_days(year)
        leap = leap_month(year)
        months = month_sequence(year)
    except CalendarError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    leap_text = f"闰{china_month(leap)}（{leap_days(year)} 天）" if leap else "无"
    summary = f"""
    [bold]农历 {year} 年[/bold]

    干支: {gan_zhi_year(year)}
    生肖: {animal_of_year(year)}
    全年: {total} 天
    闰月: {leap_text}
    """
    console.print(Panel(summary.strip(), title="Lunar Year", expand=False))

    table = Table()
    table.add_column("月份")
    table.add_column("天数", justify="right")
    for entry in months:
        label = ("闰" if entry.is_leap else "") + china_month(entry.month)
        table.add_row(label, str(entry.days))
    console.print(table)


if __name__ == "__main__":
    app()
