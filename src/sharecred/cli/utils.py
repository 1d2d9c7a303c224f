import typer
from pydantic import ValidationError

import sharecred.schemas as schemas
from sharecred.models.settings import ProvisionSettings


def exit_command(command_type: schemas.CommandType, exit_code: int, exit_msg: str):
    """
    Exit the command with the appropriate success or error code and message
    """
    if exit_code == schemas.ReturnCode.SUCCESS:
        typer.echo(f"{exit_msg}")
    else:
        typer.echo(
            f"'{command_type}' command failed with {exit_code.name} (code {exit_code.value}): {exit_msg}",
            err=True,
        )
        raise typer.Exit(code=exit_code)


def load_settings(command_type: schemas.CommandType, **overrides) -> ProvisionSettings:
    """Build settings from the environment and CLI options, exiting on invalid values."""
    try:
        return ProvisionSettings.from_env(**overrides)
    except ValidationError as e:
        exit_command(command_type, schemas.ReturnCode.CONFIG_ERROR, f"Invalid configuration: {e}")
