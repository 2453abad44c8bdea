from typing import Annotated

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: Annotated[str, typer.Option(envvar="REVIEW_CONTEXT_HOST")] = "127.0.0.1",
    port: Annotated[int, typer.Option(envvar="REVIEW_CONTEXT_PORT")] = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from review_context.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from review_context.mcp.server import create_mcp_server

    server = create_mcp_server()
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
