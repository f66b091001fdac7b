import argparse
import asyncio
import logging
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(
        description="commit-scribe - AI-drafted commit messages for staged changes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  commit-scribe generate                      Describe the staged changes
  commit-scribe generate --issue 142          Mention an issue in the title
  git diff main | commit-scribe generate -d - Describe a diff read from stdin
  commit-scribe settings                      Show current configuration
""",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    generate_parser = subparsers.add_parser("generate", help="Generate a commit message")
    generate_parser.add_argument(
        "--diff-file", "-d",
        help="Read the diff from a file ('-' for stdin) instead of git",
    )
    generate_parser.add_argument("--repo", "-r", default=".", help="Repository path")
    generate_parser.add_argument("--issue", "-i", default="", help="Issue ID to include")
    generate_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation progress logs"
    )

    subparsers.add_parser("settings", help="Show current configuration")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)
    elif args.command == "generate":
        asyncio.run(run_generate(args.diff_file, args.repo, args.issue, args.verbose))
    elif args.command == "settings":
        run_settings()
    else:
        parser.print_help()


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, markup=False)],
    )


def read_diff(diff_file: str | None, repo: str) -> str:
    from commit_scribe.git import get_staged_diff

    if diff_file == "-":
        return sys.stdin.read()
    if diff_file:
        return Path(diff_file).read_text(encoding="utf-8")
    return get_staged_diff(repo)


async def run_generate(
    diff_file: str | None = None,
    repo: str = ".",
    issue: str = "",
    verbose: bool = False,
):
    from pydantic import ValidationError
    from rich.console import Console

    from commit_scribe.core.errors import CommitScribeError, UnauthorizedError
    from commit_scribe.summarization import CommitMessageGenerator

    console = Console(stderr=True)
    _configure_logging(verbose)

    try:
        diff = read_diff(diff_file, repo)
        generator = CommitMessageGenerator()
        with console.status("Generating the commit message..."):
            message = await generator.generate(diff, issue_id=issue)
    except UnauthorizedError as e:
        console.print(f"[red]✖ {e}[/red]")
        console.print("[yellow]Check OPENAI_API_KEY or ANTHROPIC_API_KEY.[/yellow]")
        sys.exit(1)
    except (CommitScribeError, ValidationError, OSError) as e:
        console.print(f"[red]✖ {e}[/red]")
        sys.exit(1)

    console.print(f"[green]✔[/green] Generated commit message ({generator.last_mode.value}):")
    print(message)


def run_settings():
    from rich.console import Console
    from rich.table import Table

    from commit_scribe.config import get_settings

    console = Console()
    settings = get_settings()

    ai_table = Table(title="AI Configuration", show_header=False)
    ai_table.add_column("Setting", style="cyan")
    ai_table.add_column("Value", style="green")

    ai_table.add_row("LLM Provider", settings.ai.llm_provider)
    ai_table.add_row("LLM Model", settings.ai.llm_model)
    ai_table.add_row("API Type", settings.ai.openai_api_type.value)
    ai_table.add_row("Temperature", str(settings.ai.llm_temperature))
    concurrency = settings.ai.max_concurrent_requests
    ai_table.add_row("Max Concurrent Requests", str(concurrency) if concurrency else "unlimited")

    openai_status = "[green]set[/green]" if settings.openai_api_key else "[red]not set[/red]"
    ai_table.add_row("OpenAI API Key", openai_status)

    if settings.ai.anthropic_api_key.get_secret_value():
        ai_table.add_row("Anthropic API Key", "[green]set[/green]")

    console.print(ai_table)
    console.print()

    gen = settings.generation
    gen_table = Table(title="Generation Configuration", show_header=False)
    gen_table.add_column("Setting", style="cyan")
    gen_table.add_column("Value", style="green")

    gen_table.add_row("Max Input Tokens", str(gen.tokens_max_input))
    gen_table.add_row("Max Output Tokens", str(gen.tokens_max_output))
    gen_table.add_row("Emoji", str(gen.emoji))
    gen_table.add_row("Description", str(gen.description))
    gen_table.add_row("Issue IDs", f"{gen.issue_enabled} (prefix: {gen.issue_prefix or '-'})")
    gen_table.add_row("Language", gen.language)
    gen_table.add_row("Prompt Module", gen.prompt_module.value)
    gen_table.add_row("Pacing Delay", f"{gen.pacing_seconds}s")

    console.print(gen_table)


if __name__ == "__main__":
    main()
