"""Main entry point for calendar-duration."""

import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from calendar_duration.config import DEFAULT_CONFIG_PATH, DEFAULT_TIMEZONE, Config
from calendar_duration.duration import CalendarDuration
from calendar_duration.errors import InvalidTimezoneError
from calendar_duration.log import configure_logging
from calendar_duration.parser import parse_with_diagnostics

DEFAULT_ADD = "3d2h10m"
DEFAULT_SUBTRACT = "1y1mon"
FLAGS = {"-v", "--verbose", "--log-json"}

console = Console()


def configure(path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Interactive configuration setup."""
    console.print("[bold]calendar-duration configuration[/bold]")
    console.print("=" * 40)
    timezone = input(f"Timezone [{DEFAULT_TIMEZONE}]: ").strip() or DEFAULT_TIMEZONE

    config = Config(timezone=timezone)
    try:
        config.tzinfo()
    except InvalidTimezoneError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)
    config.save(path)
    console.print("\n[green]✓[/green] Configuration saved successfully!")
    console.print(f"Config file: {path}")


def _parse_reporting(text: str) -> CalendarDuration:
    """Parse a duration and warn about the parts that were ignored."""
    result = parse_with_diagnostics(text)
    for token in result.ignored:
        console.print(
            f"[yellow]Ignoring {escape(token.value + token.unit)} in {escape(repr(text))} "
            f"({token.reason.value})[/yellow]"
        )
    return result.duration


def demo(to_add: str, to_subtract: str, config: Config) -> None:
    """Add one duration to the current time, then subtract another."""
    try:
        tzinfo = config.tzinfo()
    except InvalidTimezoneError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    time = datetime.now(tzinfo)
    console.print(f"The time is now [bold]{time}[/bold]")

    duration = _parse_reporting(to_add)
    console.print(f"Will add [cyan]{duration or 'nothing'}[/cyan] to the time")
    time = time + duration
    console.print(f"The result is [bold]{time}[/bold]")

    duration = _parse_reporting(to_subtract)
    console.print(f"Will subtract [cyan]{duration or 'nothing'}[/cyan] from the time")
    time = time - duration
    console.print(f"The result is [bold]{time}[/bold]")


def main() -> None:
    """Main entry point."""
    args = [arg for arg in sys.argv[1:] if arg not in FLAGS]
    configure_logging(
        verbose="-v" in sys.argv or "--verbose" in sys.argv,
        log_json="--log-json" in sys.argv,
    )

    if args and args[0] == "config":
        configure()
        return

    config = Config.from_env() or Config.load() or Config()
    to_add = args[0] if args else DEFAULT_ADD
    to_subtract = args[1] if len(args) > 1 else DEFAULT_SUBTRACT
    demo(to_add, to_subtract, config)


if __name__ == "__main__":
    main()
