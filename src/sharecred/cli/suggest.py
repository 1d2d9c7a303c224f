from typing import Annotated

import typer

import sharecred.cli.utils as cli_utils
import sharecred.schemas as schemas
from sharecred.credentials.generator import generate_suggestion
from sharecred.exceptions import RandomnessError

app = typer.Typer()


@app.command(name="suggest")
def suggest(
    count: Annotated[
        int, typer.Option("-n", "--count", min=1, help="Number of suggestions to print.")
    ] = 1,
):
    """Print freshly generated passwords that satisfy the password rule."""
    try:
        for _ in range(count):
            typer.echo(generate_suggestion())
    except RandomnessError as e:
        cli_utils.exit_command(
            schemas.CommandType.SUGGEST, schemas.ReturnCode.RANDOMNESS_ERROR, str(e)
        )
