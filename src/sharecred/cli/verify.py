from pathlib import Path
from typing import Annotated

import typer

import sharecred.cli.utils as cli_utils
import sharecred.schemas as schemas
from sharecred.exceptions import StorageError
from sharecred.services.hashing import verify_password
from sharecred.services.storage import HashStore
from sharecred.utils import configure_logging

app = typer.Typer()


@app.command(name="verify")
def verify(
    username: Annotated[str, typer.Argument(help="Username whose hash.txt is checked.")],
    base_dir: Annotated[
        Path,
        typer.Option("-d", "--base-dir", help="Directory containing the download/ tree."),
    ] = None,
):
    """Check a password (read without echo) against download/<username>/hash.txt."""
    configure_logging()
    command_type = schemas.CommandType.VERIFY
    settings = cli_utils.load_settings(command_type, base_dir=base_dir)
    store = HashStore(settings.base_dir)

    try:
        password_hash = store.read_hash(username)
    except StorageError as e:
        cli_utils.exit_command(command_type, schemas.ReturnCode.STORAGE_ERROR, str(e))

    password = typer.prompt("Password", hide_input=True)
    if verify_password(password.strip(), password_hash):
        cli_utils.exit_command(
            command_type, schemas.ReturnCode.SUCCESS, f"Password matches for {username}"
        )
    else:
        cli_utils.exit_command(
            command_type,
            schemas.ReturnCode.VERIFICATION_FAILED,
            f"Password does not match for {username}",
        )
