#!/usr/bin/env python3
"""
Command-line interface for the resume builder core.

Works on the persisted resume in the SQLite store (VITAE_STORE_PATH), the same
record a UI front end would read and write.

Commands:
    show      - Print the stored resume as JSON
    score     - ATS readiness score with ordered suggestions and writing tips
    advise    - Bullet advice for a single line of text
    validate  - Structural validation warnings
    export    - Plain-text export (asks before exporting an incomplete resume)
    sample    - Replace the stored resume with the sample record
    clear     - Erase the stored resume
    import    - Load a resume from a YAML/JSON file (legacy shapes are migrated)
    skills    - Merge the suggested skill lists into the stored resume
    add-skill, remove-skill     - Edit one skill bucket
    add-project, remove-project - Edit the project list (ids are assigned automatically)
    template  - Show or set the selected template
    theme     - Show or set the theme color
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from omegaconf import OmegaConf

from vitae.contexts.assessment import analyze_bullet, compute_ats_score, improvement_tips, validate_resume
from vitae.contexts.authoring import SKILL_BUCKETS, ProjectNotFoundError, Resume, UnknownSkillBucketError
from vitae.contexts.export import INCOMPLETE_PROMPT, export_with_validation
from vitae.contexts.persistence import (
    PreferencesRepository,
    ResumeRepository,
    ResumeSession,
    SqliteStore,
    TemplateName,
    migrate,
)
from vitae.contexts.persistence.logger import setup_persistence_logger
from vitae.contexts.persistence.store import VITAE_STORE_PATH
from vitae.utils.logger import LOGS_PATH

app = typer.Typer(
    add_completion=False,
    help="Build, score and export a resume stored locally",
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    store_path: Path = typer.Option(VITAE_STORE_PATH, "--store", help="SQLite store file"),
    log_dir: Path = typer.Option(LOGS_PATH, "--log-dir", help="Directory for store.log"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo INFO logs to the console"),
):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    setup_persistence_logger(
        log_dir=log_dir, store_path=store_path, console_level="INFO" if verbose else "WARNING"
    )

    store = SqliteStore(store_path)
    ctx.obj = {"store": store}
    ctx.call_on_close(store.close)


def _session(ctx: typer.Context) -> ResumeSession:
    return ResumeSession(ResumeRepository(ctx.obj["store"]))


@app.command("show")
def show_command(ctx: typer.Context):
    """Print the stored resume as JSON."""
    resume = _session(ctx).resume
    typer.echo(json.dumps(resume.to_dict(), indent=2, ensure_ascii=False))


@app.command("score")
def score_command(
    ctx: typer.Context,
    top: int = typer.Option(0, "--top", "-n", help="Show only the first N suggestions (0 = all)"),
):
    """
    Show the ATS readiness score.

    Suggestions are listed in rubric order; --top keeps that order.
    """
    resume = _session(ctx).resume
    result = compute_ats_score(resume)

    color = {"Strong": typer.colors.GREEN, "Good": typer.colors.YELLOW}.get(
        result.band, typer.colors.RED
    )
    typer.secho(f"ATS score: {result.score}/100 ({result.band})", fg=color, bold=True)

    suggestions = result.top_suggestions(top) if top > 0 else result.suggestions
    if suggestions:
        typer.echo("\nSuggestions:")
        for suggestion in suggestions:
            typer.echo(f"  • {suggestion}")

    tips = improvement_tips(resume)
    if tips:
        typer.echo("\nTips:")
        for tip in tips:
            typer.echo(f"  • {tip}")


@app.command("advise")
def advise_command(text: str = typer.Argument(..., help="A single bullet / description line")):
    """Check one bullet for an opening action verb and a quantified impact."""
    guidance = analyze_bullet(text)
    if not guidance.hints:
        typer.secho("✓ Looks good", fg=typer.colors.GREEN)
        return
    for hint in guidance.hints:
        typer.secho(f"• {hint}", fg=typer.colors.YELLOW)


@app.command("validate")
def validate_command(ctx: typer.Context):
    """Report structural warnings (exit code 1 if any)."""
    result = validate_resume(_session(ctx).resume)
    if result.is_valid:
        typer.secho("✓ Resume is complete", fg=typer.colors.GREEN)
        return
    for warning in result.warnings:
        typer.secho(f"✗ {warning}", fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command("export")
def export_command(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Export an incomplete resume without asking"),
):
    """
    Export the resume as plain text.

    An incomplete resume is exported only after confirmation; declining cancels.
    """
    resume = _session(ctx).resume
    outcome = export_with_validation(resume, confirm_incomplete=yes)

    if outcome.needs_confirmation:
        for warning in outcome.warnings:
            typer.secho(f"✗ {warning}", fg=typer.colors.YELLOW, err=True)
        if not typer.confirm(INCOMPLETE_PROMPT, default=False, err=True):
            typer.echo("Export cancelled.", err=True)
            raise typer.Exit(code=1)
        outcome = export_with_validation(resume, confirm_incomplete=True)

    if output is None:
        typer.echo(outcome.text)
    else:
        output.write_text(outcome.text + "\n", encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)


@app.command("sample")
def sample_command(ctx: typer.Context):
    """Replace the stored resume with the sample record."""
    resume = _session(ctx).load_sample()
    typer.secho(f"✓ Loaded sample resume for {resume.name}", fg=typer.colors.GREEN)


@app.command("clear")
def clear_command(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Erase the stored resume."""
    if not yes:
        typer.confirm("Erase the stored resume?", abort=True)
    _session(ctx).clear()
    typer.secho("✓ Resume cleared", fg=typer.colors.GREEN)


@app.command("import")
def import_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON resume file"),
):
    """Load a resume file, migrate legacy fields, and store it."""
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if not isinstance(data, dict):
        typer.secho(f"✗ {path} does not contain a resume mapping", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    resume = Resume.from_dict(migrate(data))
    _session(ctx).replace(resume)
    typer.secho(
        f"✓ Imported {path.name}: {len(resume.experience)} experience, "
        f"{len(resume.projects)} projects, {resume.skills.total()} skills",
        fg=typer.colors.GREEN,
    )


@app.command("skills")
def skills_command(ctx: typer.Context):
    """Merge the suggested skill lists into the stored resume."""
    session = _session(ctx)
    with session.edit() as resume:
        added = resume.skills.merge()
    typer.secho(f"✓ Added {added} suggested skill(s)", fg=typer.colors.GREEN)


@app.command("add-skill")
def add_skill_command(
    ctx: typer.Context,
    bucket: str = typer.Argument(..., help="technical, soft or tools"),
    skill: str = typer.Argument(..., help="Skill to add"),
):
    """Add one skill to a bucket."""
    session = _session(ctx)
    try:
        with session.edit() as resume:
            added = resume.skills.add(bucket, skill)
    except UnknownSkillBucketError as e:
        typer.secho(f"✗ {e.message} (choose from {', '.join(SKILL_BUCKETS)})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if added:
        typer.secho(f"✓ Added {skill.strip()} to {bucket}", fg=typer.colors.GREEN)
    else:
        typer.secho(f"⚠ {skill.strip()!r} is blank or already in {bucket}", fg=typer.colors.YELLOW)


@app.command("remove-skill")
def remove_skill_command(
    ctx: typer.Context,
    bucket: str = typer.Argument(..., help="technical, soft or tools"),
    skill: str = typer.Argument(..., help="Skill to remove"),
):
    """Remove one skill from a bucket."""
    session = _session(ctx)
    try:
        with session.edit() as resume:
            removed = resume.skills.remove(bucket, skill)
    except UnknownSkillBucketError as e:
        typer.secho(f"✗ {e.message} (choose from {', '.join(SKILL_BUCKETS)})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not removed:
        typer.secho(f"✗ {skill!r} is not in {bucket}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Removed {skill} from {bucket}", fg=typer.colors.GREEN)


@app.command("add-project")
def add_project_command(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Project title"),
    tech: Optional[List[str]] = typer.Option(None, "--tech", "-t", help="Technology (repeatable)"),
    description: str = typer.Option("", "--description", "-d"),
    live_url: str = typer.Option("", "--live-url"),
    github_url: str = typer.Option("", "--github-url"),
):
    """Append a project; its id is assigned automatically."""
    with _session(ctx).edit() as resume:
        project = resume.add_project(
            title=title,
            description=description,
            tech_stack=list(tech or []),
            live_url=live_url,
            github_url=github_url,
        )
    typer.secho(f"✓ Added project {project.title!r} (id {project.id})", fg=typer.colors.GREEN)


@app.command("remove-project")
def remove_project_command(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Id shown by 'show'"),
):
    """Remove a project by id."""
    session = _session(ctx)
    try:
        with session.edit() as resume:
            project = resume.remove_project(project_id)
    except ProjectNotFoundError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Removed project {project.title!r} (id {project_id})", fg=typer.colors.GREEN)


@app.command("template")
def template_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="classic, modern or minimal"),
):
    """Show or set the selected template."""
    preferences = PreferencesRepository(ctx.obj["store"])
    if name is None:
        typer.echo(preferences.load_template().value)
        return
    try:
        preferences.save_template(name)
    except ValueError:
        choices = ", ".join(t.value for t in TemplateName)
        typer.secho(f"✗ Unknown template {name!r} (choose from {choices})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Template set to {name}", fg=typer.colors.GREEN)


@app.command("theme")
def theme_command(
    ctx: typer.Context,
    color: Optional[str] = typer.Argument(None, help="Hex color or palette name (teal, navy, ...)"),
):
    """Show or set the theme color."""
    preferences = PreferencesRepository(ctx.obj["store"])
    if color is None:
        typer.echo(preferences.load_theme_color())
        return
    try:
        saved = preferences.save_theme_color(color)
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Theme color set to {saved}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
