import logging
import os

import typer

from review_context.cli.context import check, context, hunks, languages, number
from review_context.cli.serve import serve_app

app = typer.Typer(
    name="review-context",
    help="Find the function or class enclosing a diff hunk.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("context")(context)
app.command("check")(check)
app.command("hunks")(hunks)
app.command("number")(number)
app.command("languages")(languages)
app.add_typer(serve_app, name="serve")


@app.callback()
def _configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("REVIEW_CONTEXT_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    app()
