import json
import typer
from .logging import configure_logging, logger
from .config import settings
from .dispatcher import UserManagementAudit
from .errors import AuditError
from .events import parse_event
from .siem import SiemSink


app = typer.Typer(add_completion=False, no_args_is_help=True)


def _build_audit() -> UserManagementAudit:
    configure_logging()
    logger.info("startup", env=settings.env)
    return UserManagementAudit(SiemSink(settings), settings)


def _dispatch(audit: UserManagementAudit, raw: str) -> None:
    try:
        audit.handle(parse_event(json.loads(raw)))
    except json.JSONDecodeError as e:
        typer.echo(f"invalid JSON: {e}", err=True)
        raise typer.Exit(code=1)
    except AuditError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command("handle-event")
def handle_event(event_json: str = typer.Argument(..., help="Event as a JSON object")):
    _dispatch(_build_audit(), event_json)


@app.command("replay")
def replay(source: typer.FileText = typer.Argument("-", help="JSON lines file, '-' for stdin")):
    audit = _build_audit()
    for line in source:
        if line.strip():
            _dispatch(audit, line)


@app.command("assign")
def assign(uid: str):
    try:
        _build_audit().assign(uid)
    except AuditError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command("unassign")
def unassign(uid: str):
    try:
        _build_audit().unassign(uid)
    except AuditError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
