from typing import Any, Dict, Optional
import typer
import asyncio
import logging
from dotenv import load_dotenv
from pydantic import ValidationError
from typing_extensions import Annotated
from rich.console import Console
from rich.live import Live
from rich.prompt import Prompt
from rich.spinner import Spinner
from rich.table import Table

from solana_agent_kit.client.agent_kit import SolanaAgentKit, load_config
from solana_agent_kit.domains.errors import AgentKitError
from solana_agent_kit.domains.evals import EvalReport
from solana_agent_kit.factories.agent_factory import (
    SolanaAgentKitFactory,
    config_from_env,
)
from solana_agent_kit.services.agent import AgentService
from solana_agent_kit.services.evals import (
    BUNDLED_DATASETS,
    load_bundled_dataset,
    load_dataset,
    run_complex_eval,
)

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()

ConfigOption = Annotated[
    Optional[str],
    typer.Option(help="Path to a JSON or Python config file. Defaults to environment variables."),
]


def _resolve_config(config: Optional[str]) -> Dict[str, Any]:
    if config:
        return load_config(config)
    load_dotenv()
    return config_from_env()


def _build_agent(config: Optional[str]) -> tuple:
    try:
        settings = _resolve_config(config)
        agent = SolanaAgentKitFactory.create_from_config(settings)
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except AgentKitError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)
    return settings, agent


async def stream_agent_response(
    service: AgentService, messages: list, message: str
) -> None:
    """Helper function to stream and display agent response."""
    full_response = ""
    with Live(console=console, refresh_per_second=10, transient=True) as live:
        live.update(Spinner("dots", "Thinking..."))

        def on_delta(delta: str) -> None:
            nonlocal full_response
            full_response += delta
            live.update(full_response)

        try:
            outcome = await service.respond(messages, message, on_delta=on_delta)
        except AgentKitError as e:
            console.print(f"[bold red]Error during processing:[/bold red] {e}")
            return

    for call, result in zip(outcome.tool_calls, outcome.tool_results):
        console.print(
            f"[dim]{call.name}({call.arguments}) -> {result.get('status')}[/dim]"
        )
    if outcome.text:
        console.print(f"[bright_blue]Agent:[/bright_blue] {outcome.text}")
    else:
        console.print("[yellow]Agent did not produce a response.[/yellow]")


async def _chat_loop(service: AgentService, agent: SolanaAgentKit) -> None:
    messages = service.new_conversation()
    try:
        while True:
            user_message = Prompt.ask("[bold green]You[/bold green]")
            if user_message.lower() in ["exit", "quit"]:
                console.print("[yellow]Exiting chat session.[/yellow]")
                break
            if not user_message.strip():
                continue
            await stream_agent_response(service, messages, user_message)
    finally:
        await agent.aclose()


@app.command()
def chat(config: ConfigOption = None):
    """
    Start an interactive tool-calling chat session with the agent.
    Type 'exit' or 'quit' to end the session.
    """
    with console.status("[bold green]Initializing agent...", spinner="dots"):
        settings, agent = _build_agent(config)
        try:
            service = SolanaAgentKitFactory.create_agent_service(settings, agent)
        except AgentKitError as e:
            console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
            raise typer.Exit(code=1)
    console.print(
        f"[green]Agent initialized with {len(agent.actions)} actions. Start chatting![/green]"
    )
    console.print("[dim]Type 'exit' or 'quit' to end.[/dim]")

    try:
        asyncio.run(_chat_loop(service, agent))
    except KeyboardInterrupt:
        console.print("\n[yellow]Exiting chat session (KeyboardInterrupt).[/yellow]")


@app.command()
def actions(config: ConfigOption = None):
    """List the actions registered on the agent."""
    _, agent = _build_agent(config)

    table = Table(title="Registered actions")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Similes")
    table.add_column("Description")
    for action in agent.actions:
        table.add_row(action.name, ", ".join(action.similes), action.description)
    console.print(table)
    asyncio.run(agent.aclose())


def print_report(report: EvalReport) -> None:
    for dataset in report.datasets:
        table = Table(title=dataset.description)
        table.add_column("#", justify="right")
        table.add_column("Input")
        table.add_column("Result")
        table.add_column("Details")
        for i, turn in enumerate(dataset.turns, start=1):
            status = "[green]PASS[/green]" if turn.passed else "[red]FAIL[/red]"
            details = turn.reason or (
                ", ".join(c.name for c in turn.tool_calls) or turn.response
            )
            table.add_row(str(i), turn.input, status, details)
        console.print(table)
    console.print(
        f"[bold]{report.name}:[/bold] {report.passed_turns}/{report.total_turns} turns passed"
    )


@app.command(name="eval")
def run_eval(
    dataset: Annotated[
        str,
        typer.Argument(
            help=f"Path to an eval JSON file or a bundled dataset name ({', '.join(BUNDLED_DATASETS)})."
        ),
    ],
    config: ConfigOption = None,
):
    """Run a multi-turn tool-call evaluation. Tools are not executed."""
    if dataset in BUNDLED_DATASETS:
        datasets = load_bundled_dataset(dataset)
    else:
        try:
            datasets = load_dataset(dataset)
        except FileNotFoundError:
            console.print(f"[bold red]Error:[/bold red] Eval file not found at '{dataset}'")
            raise typer.Exit(code=1)
        except (ValueError, ValidationError) as e:
            console.print(f"[bold red]Error:[/bold red] Invalid eval file '{dataset}': {e}")
            raise typer.Exit(code=1)

    settings, agent = _build_agent(config)
    try:
        service = SolanaAgentKitFactory.create_agent_service(settings, agent, dry_run=True)
    except AgentKitError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)

    async def _run() -> EvalReport:
        try:
            return await run_complex_eval(datasets, dataset, service)
        finally:
            await agent.aclose()

    report = asyncio.run(_run())
    print_report(report)
    if not report.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
