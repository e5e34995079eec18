"""Check the layer contracts declared in ``pyproject.toml`` with Import Linter."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import click
from importlinter.cli import lint_imports_command

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "pyproject.toml"


def run_contracts(config: Path, *, verbose: bool = False) -> int:
    """Invoke Import Linter's Click command and propagate the exit code."""
    args = ["--config", str(config)]
    if verbose:
        args.append("--verbose")

    try:
        lint_imports_command.main(
            args=args,
            prog_name="calorie-bank-lint-imports",
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:  # pragma: no cover - click handles sys.exit
        return exc.exit_code
    except click.ClickException as exc:  # pragma: no cover - surfaced to stderr
        exc.show()
        return 1
    return 0


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG,
    show_default=True,
    help="File holding the [tool.importlinter] contracts.",
)
@click.option("--verbose", is_flag=True, help="Show each import chain that was checked.")
def lint(config: Path, verbose: bool) -> None:
    """Fail when a layer imports one it must not depend on."""
    sys.exit(run_contracts(config, verbose=verbose))


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        lint.main(args=args, prog_name="calorie-bank-lint-imports", standalone_mode=False)
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover - convenience execution path
    sys.exit(main(sys.argv[1:]))
