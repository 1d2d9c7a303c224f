from pathlib import Path
from typing import Annotated

import typer

import sharecred.cli.utils as cli_utils
import sharecred.schemas as schemas
from sharecred.exceptions import (
    HashingError,
    InputClosedError,
    RandomnessError,
    StorageError,
)
from sharecred.services.provisioner import Provisioner, report
from sharecred.utils import configure_logging, log

app = typer.Typer()


@app.command(name="provision")
def provision(
    host: Annotated[
        str, typer.Option("--host", help="Host of the file-sharing service.")
    ] = None,
    base_dir: Annotated[
        Path,
        typer.Option("-d", "--base-dir", help="Directory containing the download/ tree."),
    ] = None,
    cost: Annotated[int, typer.Option("--cost", help="bcrypt cost factor.")] = None,
    suggest: Annotated[
        bool,
        typer.Option(
            "--suggest/--no-suggest",
            envvar="SHARECRED_OFFER_SUGGESTION",
            help="Offer a generated password that is accepted with Enter.",
        ),
    ] = True,
    verbose: Annotated[bool, typer.Option("-v", "--verbose")] = False,
):
    """
    Interactively provisions one download account.

    This command performs the following actions:
    - Prompts for a username until it is 3-20 allowed characters
    - Prompts for a password until it is 8-20 allowed characters with a lowercase,
      an uppercase and a special character (Enter accepts the suggestion, if offered)
    - Creates download/<username> and writes the bcrypt hash to hash.txt
    - Prints the hash file location, the download link and the password

    Example usage:
        sharecred provision --host share.example.com -d /srv/share
    """
    configure_logging(verbose)
    command_type = schemas.CommandType.PROVISION
    settings = cli_utils.load_settings(
        command_type,
        host=host,
        base_dir=base_dir,
        bcrypt_cost=cost,
        offer_suggestion=suggest,
    )
    log.info(f"Provisioning under {settings.base_dir} for host {settings.host}")

    try:
        result = Provisioner(settings).run()
    except InputClosedError:
        cli_utils.exit_command(
            command_type, schemas.ReturnCode.ABORTED, "Input closed before provisioning finished"
        )
    except RandomnessError as e:
        cli_utils.exit_command(command_type, schemas.ReturnCode.RANDOMNESS_ERROR, str(e))
    except StorageError as e:
        cli_utils.exit_command(command_type, schemas.ReturnCode.STORAGE_ERROR, str(e))
    except HashingError as e:
        cli_utils.exit_command(command_type, schemas.ReturnCode.HASHING_ERROR, str(e))

    report(result)
