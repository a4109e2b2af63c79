import typer

from tokenizors.cli.minify import minify_app
from tokenizors.cli.serve import serve_app
from tokenizors.cli.tokenize import tokenize_app

app = typer.Typer(
    name="tokenizors",
    help="Count LLM tokens and minify source code.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(tokenize_app, name="tokenize")
app.add_typer(minify_app, name="minify")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
