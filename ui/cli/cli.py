"""CLI entrypoint for sysinfo."""

from __future__ import annotations

import typer

from ui.cli import commands

app = typer.Typer(
    help="Report host system, user and directory information",
    add_completion=False,
)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def sysinfo_cmd(
    tokens: list[str] | None = typer.Argument(None, help="Command tokens, or -i for interactive mode"),
) -> None:
    """Run one command, or start an interactive session with -i."""
    code = commands.run(tokens or [])
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
