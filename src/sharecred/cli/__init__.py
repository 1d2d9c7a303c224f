import typer
from sharecred.cli.provision import app as provision_command
from sharecred.cli.suggest import app as suggest_command
from sharecred.cli.check import app as check_command
from sharecred.cli.verify import app as verify_command

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True))

app = typer.Typer(
    help="Sharecred: provision download accounts for the file-sharing service",
    add_completion=False,
)

app.add_typer(provision_command)
app.add_typer(suggest_command)
app.add_typer(check_command)
app.add_typer(verify_command)
