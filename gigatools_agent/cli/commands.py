"""CLI commands for gigatools-agent."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from gigatools_agent.agent.assistant import Assistant
from gigatools_agent.agent.tools import build_default_tools
from gigatools_agent.config import Config, load_config, save_default_config
from gigatools_agent.errors import StartupConfigurationError, TransportError
from gigatools_agent.providers.litellm_provider import LiteLLMProvider
from gigatools_agent.utils.helpers import format_error, mask_secret, setup_logging

app = typer.Typer(
    name="gigatools-agent",
    help="gigatools-agent: a GigaChat assistant that can calculate, tell the time and list incidents",
)
console = Console()

EXIT_COMMAND = "exit"

EXAMPLE_PROMPTS = (
    "what is 3 plus 8",
    "there were 2 apples in the box, then 10 more apples were added, and then 3 apples were stolen twice. "
    "how many apples are left in the box in total",
    "how many days until the new year",
    "what was the total damage in the first quarter of 2025",
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log model requests and responses"),
) -> None:
    """gigatools-agent CLI entrypoint."""
    ctx.obj = {"verbose": verbose}


def _load(ctx: typer.Context, config_path: Optional[Path]) -> Config:
    config = load_config(config_path)
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    setup_logging("DEBUG" if verbose else config.logging.level)
    return config


def resolve_credential(auth_key: Optional[str], config: Config) -> str:
    """Pick the credential from the command line, falling back to config."""
    credential = (auth_key or "").strip() or config.get_api_key()
    if not credential:
        raise StartupConfigurationError(
            "Missing credential: pass the GigaChat authorization key as the first argument."
        )
    return credential


def create_assistant(config: Config, api_key: str) -> Assistant:
    defaults = config.agent
    provider = LiteLLMProvider(
        api_key=api_key,
        api_base=config.get_api_base(),
        default_model=defaults.model,
        max_retries=defaults.max_retries,
        profanity_check=defaults.profanity_check,
    )
    return Assistant(
        provider=provider,
        tools=build_default_tools(),
        max_iterations=defaults.max_tool_iterations,
        max_tokens=defaults.max_tokens,
        temperature=defaults.temperature,
    )


def run_dialog(assistant: Assistant) -> None:
    """
    Relay stdin lines to the assistant until 'exit' or end of input.

    Transport and other errors propagate to the caller.
    """
    while True:
        try:
            user_input = console.input()
            if user_input.lower() == EXIT_COMMAND:
                break
            response = asyncio.run(assistant.chat(user_input))
            console.print(response, markup=False, highlight=False, soft_wrap=True)
        except (KeyboardInterrupt, EOFError):
            break


@app.command()
def chat(
    ctx: typer.Context,
    auth_key: Optional[str] = typer.Argument(None, help="GigaChat authorization key", show_default=False),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Single-turn message"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Chat with the assistant."""
    config = _load(ctx, config_path)

    try:
        api_key = resolve_credential(auth_key, config)
    except StartupConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    assistant = create_assistant(config, api_key)

    try:
        if message:
            response = asyncio.run(assistant.chat(message))
            console.print(response, markup=False, highlight=False, soft_wrap=True)
            return

        for prompt in EXAMPLE_PROMPTS:
            logger.info(prompt)
        logger.info(f"Start Dialog (type '{EXIT_COMMAND}' to exit):")
        run_dialog(assistant)
    except TransportError as e:
        logger.error(f"code: {e.status_code} response: {e.body}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception(f"Dialog aborted: {format_error(e)}")
        raise typer.Exit(1)


@app.command()
def init(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Write a default configuration file."""
    try:
        path = save_default_config(config_path, overwrite=force)
    except FileExistsError as e:
        console.print(f"[red]{e}[/red] (use --force to overwrite)")
        raise typer.Exit(1)
    console.print(f"[green]Config created at:[/green] {path}")
    console.print("\n[yellow]Next steps:[/yellow]")
    console.print("1. Optionally add your authorization key under providers.gigachat.api_key")
    console.print("2. Run: gigatools-agent chat <AUTH_KEY>")


@app.command()
def status(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Show current configuration."""
    config = _load(ctx, config_path)

    table = Table(title="gigatools-agent Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Model", config.agent.model)
    table.add_row("Max Retries", str(config.agent.max_retries))
    table.add_row("Profanity Check", "Enabled" if config.agent.profanity_check else "Disabled")
    table.add_row("Max Tool Iterations", str(config.agent.max_tool_iterations))
    table.add_row("Max Tokens", str(config.agent.max_tokens))
    table.add_row("Temperature", str(config.agent.temperature))

    api_key = config.get_api_key()
    table.add_row("API Key", mask_secret(api_key) if api_key else "[dim]Pass on the command line[/dim]")
    table.add_row("API Base", config.get_api_base() or "Default")
    table.add_row("Log Level", config.logging.level)

    console.print(table)


@app.command()
def tools() -> None:
    """List the tools offered to the model."""
    registry = build_default_tools()

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Parameters", style="magenta")
    table.add_column("Description", style="green")

    for name in registry.tool_names:
        tool = registry.get(name)
        params = tool.parameters.get("properties", {})
        signature = ", ".join(f"{key}: {prop['type']}" for key, prop in params.items()) or "-"
        table.add_row(name, signature, tool.description)

    console.print(table)


if __name__ == "__main__":
    app()
