from typing import Annotated

import typer

import sharecred.cli.utils as cli_utils
import sharecred.schemas as schemas
from sharecred.credentials.validator import DEFAULT_VALIDATOR
from sharecred.utils import configure_logging

app = typer.Typer()


@app.command(name="check-username")
def check_username(
    username: Annotated[str, typer.Argument(help="Username to check.")],
):
    """Check a username against the username rule."""
    configure_logging()
    reason = DEFAULT_VALIDATOR.check_username(username.strip())
    if reason is None:
        cli_utils.exit_command(
            schemas.CommandType.CHECK_USERNAME, schemas.ReturnCode.SUCCESS, "Username is valid"
        )
    else:
        cli_utils.exit_command(
            schemas.CommandType.CHECK_USERNAME,
            schemas.ReturnCode.INVALID_CREDENTIAL,
            DEFAULT_VALIDATOR.username_message(reason),
        )


@app.command(name="check-password")
def check_password():
    """Check a password (read without echo) against the password rule."""
    configure_logging()
    password = typer.prompt("Password", hide_input=True)
    reason = DEFAULT_VALIDATOR.check_password(password.strip())
    if reason is None:
        cli_utils.exit_command(
            schemas.CommandType.CHECK_PASSWORD, schemas.ReturnCode.SUCCESS, "Password is valid"
        )
    else:
        cli_utils.exit_command(
            schemas.CommandType.CHECK_PASSWORD,
            schemas.ReturnCode.INVALID_CREDENTIAL,
            DEFAULT_VALIDATOR.password_message(reason),
        )
