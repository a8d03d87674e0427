"""
g2o CLI - Main entry point.

Provides commands for:
- generate: Send a prompt to the backend
- count-tokens: Estimate the token count of a prompt
- config: Show configuration
- version: Show version information
"""

import asyncio
import logging

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="g2o",
    help="Gemini-style content generation on a local Ollama server",
    add_completion=True,
)
console = Console()


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="User prompt"),
    model: str | None = typer.Option(None, "--model", "-m", help="Model name"),
    system: str | None = typer.Option(None, "--system", "-s", help="System instruction"),
    temperature: float | None = typer.Option(None, "--temperature", "-t", help="Temperature"),
    top_p: float | None = typer.Option(None, "--top-p", help="Nucleus sampling threshold"),
    max_tokens: int | None = typer.Option(None, "--max-tokens", help="Max output tokens"),
    base_url: str | None = typer.Option(None, "--base-url", "-u", help="Backend base URL"),
    stream: bool = typer.Option(False, "--stream", help="Use the streaming interface"),
) -> None:
    """Generate a response for a prompt."""
    from g2o.config import get_settings
    from g2o.errors import G2OError
    from g2o.generators import OllamaContentGenerator
    from g2o.types import GenerateContentConfig, GenerateContentParameters, GenerationConfig

    settings = get_settings()
    configure_logging(settings.app.log_level)

    request = GenerateContentParameters(
        model=model,
        contents=prompt,
        config=GenerateContentConfig(
            system_instruction=system,
            generation_config=GenerationConfig(
                temperature=temperature,
                top_p=top_p,
                max_output_tokens=max_tokens,
            ),
        ),
    )

    async def run() -> list:
        async with OllamaContentGenerator(base_url=base_url) as generator:
            if not stream:
                return [await generator.generate_content(request, "cli")]
            chunks = []
            async for chunk in await generator.generate_content_stream(request, "cli"):
                chunks.append(chunk)
            return chunks

    try:
        responses = asyncio.run(run())
    except G2OError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    for response in responses:
        console.print(escape(response.text or ""))

    usage = responses[-1].usage_metadata if responses else None
    if usage is not None:
        console.print(
            f"[dim]Tokens: {usage.prompt_token_count} in / "
            f"{usage.candidates_token_count} out / {usage.total_token_count} total[/dim]"
        )


@app.command("count-tokens")
def count_tokens(
    prompt: str = typer.Argument(..., help="Text to measure"),
) -> None:
    """Estimate the token count of a prompt (about 4 characters per token)."""
    from g2o.core.converter import to_contents
    from g2o.core.token_estimator import HeuristicTokenCounter

    total = HeuristicTokenCounter().count_tokens(to_contents(prompt))
    console.print(f"{total}")


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show, path"),
) -> None:
    """Show configuration."""
    from g2o.config import get_settings, get_settings_dict

    if action == "show":
        console.print_json(data=get_settings_dict())

    elif action == "path":
        settings = get_settings()
        if settings.app.config_path:
            console.print(str(settings.app.config_path))
        else:
            console.print("[dim]No config file specified[/dim]")

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("[dim]Available actions: show, path[/dim]")
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    from g2o import __version__

    console.print(f"g2o version {__version__}")


if __name__ == "__main__":
    app()
