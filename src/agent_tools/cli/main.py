"""
Main CLI entry point for Agent Tools.

Provides the ``agt`` command-line interface using Click. Output on stdout
is plain structured text meant to be read by an LLM; errors and logging
go to stderr.
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click

import agent_tools
import agent_tools.catalog as catalog
import agent_tools.config as config
import agent_tools.constants as constants
import agent_tools.docs as docs
import agent_tools.errors as errors

CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _configure_logging(level: str) -> None:
    """Set the diagnostic level for all agent_tools loggers."""
    _logging.getLogger("agent_tools").setLevel(getattr(_logging, level))


def _fail(error: errors.AgentToolsError) -> _typing.NoReturn:
    """Report an error on stderr and exit non-zero."""
    _click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


def _get_catalog(ctx: _click.Context) -> catalog.SkillCatalog:
    """Build a catalog rooted at the configured install root."""
    settings: config.Settings = ctx.obj["settings"]
    return catalog.SkillCatalog(config.get_install_root(settings))


def _print_skills(records: list[catalog.SkillRecord], json_output: bool) -> None:
    """Print records as SKILL/DESCRIPTION/CMD blocks, or as JSON."""
    if json_output:
        _click.echo(_json.dumps([r.to_dict() for r in records], indent=2))
        return

    if not records:
        _click.echo(constants.NO_SKILLS_FOUND)
        return

    for record in records:
        _click.echo(f"SKILL: {record.name}")
        _click.echo(f"DESCRIPTION: {record.description}")
        _click.echo(f"CMD: {constants.PROGRAM_NAME} skill get {record.name}")
        _click.echo()


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(
    agent_tools.__version__, "-v", "--version", prog_name=constants.PROGRAM_NAME
)
@_click.option(
    "--verbose",
    is_flag=True,
    help="Write debug logging to stderr",
)
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """
    Agent Tools CLI - Search and fetch agent skills.

    Output format is designed for LLM consumption (plain text, structured).

    \b
    Examples:
        agt skill search testing        # Find skills by keyword
        agt skill all                   # List every skill
        agt skill get writing-tests     # Print a skill's instructions
        agt init                        # Document agt in ./AGENTS.md
    """
    try:
        settings = config.Settings()
    except ValueError as e:
        _click.echo(f"Error: Invalid configuration: {e}", err=True)
        raise SystemExit(1) from None

    _configure_logging("DEBUG" if verbose else settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# =============================================================================
# Skill Commands
# =============================================================================


@cli.group(name="skill")
def skill_group() -> None:
    """Search, list, and fetch agent skills."""
    pass


@skill_group.command(name="search")
@_click.argument("keywords", nargs=-1)
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.pass_context
def skill_search(
    ctx: _click.Context, keywords: tuple[str, ...], json_output: bool
) -> None:
    """Search for skills by keywords (any keyword matches)."""
    try:
        records = _get_catalog(ctx).search(list(keywords))
    except errors.AgentToolsError as e:
        _fail(e)
    _print_skills(records, json_output)


@skill_group.command(name="all")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.pass_context
def skill_all(ctx: _click.Context, json_output: bool) -> None:
    """List all available skills."""
    try:
        records = _get_catalog(ctx).discover()
    except errors.AgentToolsError as e:
        _fail(e)
    _print_skills(records, json_output)


@skill_group.command(name="get")
@_click.argument("name")
@_click.pass_context
def skill_get(ctx: _click.Context, name: str) -> None:
    """Get full content of a skill."""
    try:
        body = _get_catalog(ctx).get(name)
    except errors.AgentToolsError as e:
        _fail(e)
    _click.echo(body, nl=False)


# =============================================================================
# Project Commands
# =============================================================================


@cli.command(name="init")
@_click.option(
    "--file-path",
    type=_click.Path(dir_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Full path to the agents file (default: AGENTS.md in current directory)",
)
@_click.pass_context
def init_cmd(ctx: _click.Context, file_path: _pathlib.Path | None) -> None:
    """Initialize agent-tools documentation in AGENTS.md."""
    settings: config.Settings = ctx.obj["settings"]
    try:
        if file_path is not None:
            target = file_path.resolve()
        else:
            target = _pathlib.Path.cwd() / settings.agents_file
    except OSError as e:
        path = _pathlib.Path(file_path or settings.agents_file)
        _fail(errors.DocumentationIOError(path, str(e)))

    try:
        action = docs.install_documentation(target, _get_catalog(ctx))
    except errors.AgentToolsError as e:
        _fail(e)

    if action == "updated":
        _click.echo(f"Updated existing agent-tools section in {target}")
    else:
        _click.echo(f"Added new agent-tools section to {target}")


@cli.command(name="get-dir")
@_click.pass_context
def get_dir(ctx: _click.Context) -> None:
    """Print the agent-tools root directory (holds the skill repository)."""
    settings: config.Settings = ctx.obj["settings"]
    _click.echo(str(config.get_install_root(settings)))


def main() -> None:
    """Main entry point with correct program name."""
    # Diagnostics go to stderr; stdout is reserved for command output
    _logging.basicConfig(stream=_sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    cli(prog_name=constants.PROGRAM_NAME)


if __name__ == "__main__":
    main()
