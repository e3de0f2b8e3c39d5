"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer renders usage errors itself and exits with code 2; every exit
    is turned into a return code here.
    """
    import typer

    from cargolinks.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(argv, standalone_mode=True)
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
