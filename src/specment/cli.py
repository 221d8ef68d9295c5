"""Command line entry points: create-specment and specment-integrate."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from specment import __version__
from specment.config import SpecmentConfig
from specment.core.collector import SelectionCollector, parse_feature_list
from specment.core.generator import ProjectGenerator
from specment.core.integrator import Integrator
from specment.errors import ConfigError, UserCancelledError, ValidationError
from specment.locales import Language, translate
from specment.models import CreateOptions
from specment.templates import get_all_template_names
from specment.ui import formatter

logger = logging.getLogger("specment")

LANGUAGE_CHOICES = [lang.value for lang in Language]


def setup_logging(verbose: bool) -> None:
    """Send specment's log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _fail(language: Language, error: Exception) -> None:
    formatter.error(f"{translate(language, 'error')}: {error}")
    raise SystemExit(1)


@click.command()
@click.version_option(version=__version__, prog_name="create-specment")
@click.argument("project_name", required=False)
@click.option(
    "--template",
    "-t",
    help=f"Template to use ({', '.join(get_all_template_names())})",
)
@click.option("--skip-install", is_flag=True, help="Do not install dependencies")
@click.option("--verbose", is_flag=True, help="Show detailed output")
@click.option(
    "--lang",
    type=click.Choice(LANGUAGE_CHOICES),
    help="Language for prompts and generated labels",
)
@click.option(
    "--features",
    "-f",
    help="Comma-separated features to enable; pass an empty string for none",
)
def main(
    project_name: Optional[str],
    template: Optional[str],
    skip_install: bool,
    verbose: bool,
    lang: Optional[str],
    features: Optional[str],
):
    """Create a Docusaurus site for specification documents.

    PROJECT_NAME is the directory to create (letters, digits, - and _).

    \b
    Examples:
      create-specment
      create-specment my-spec -t requirements --lang en --features mermaid
      create-specment api-docs -t api-spec --skip-install
    """
    setup_logging(verbose)
    options = CreateOptions(
        template=template,
        skip_install=skip_install,
        verbose=verbose,
        language=Language(lang) if lang else None,
        features=parse_feature_list(features),
    )
    config = SpecmentConfig.from_env()
    logger.debug("Config: %s", config.to_dict())

    collector = SelectionCollector(options)
    try:
        selections = collector.run(project_name)
        generator = ProjectGenerator(selections, options, config)
        generator.generate()
    except UserCancelledError:
        return
    except (ValidationError, ConfigError) as e:
        _fail(collector.language, e)

    formatter.completion(selections.project_name, selections.language, generator.package_manager)


@click.command()
@click.version_option(version=__version__, prog_name="specment-integrate")
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--name", help="Project name (defaults to the directory name)")
@click.option("--template", "-t", help="Template to use")
@click.option("--lang", type=click.Choice(LANGUAGE_CHOICES), help="Language")
@click.option("--features", "-f", help="Comma-separated features to enable")
@click.option("--overwrite", is_flag=True, help="Let generated versions and scripts win conflicts")
@click.option("--verbose", is_flag=True, help="Show detailed output")
def integrate_cmd(
    path: Path,
    name: Optional[str],
    template: Optional[str],
    lang: Optional[str],
    features: Optional[str],
    overwrite: bool,
    verbose: bool,
):
    """Add specment templates and features to an existing project.

    PATH is the Docusaurus project directory (default: current directory).
    Existing files are kept; package.json is merged and conflicts reported.
    """
    setup_logging(verbose)
    target = path.resolve()
    options = CreateOptions(
        template=template,
        skip_install=True,
        verbose=verbose,
        language=Language(lang) if lang else None,
        features=parse_feature_list(features),
    )

    collector = SelectionCollector(options)
    try:
        selections = collector.run(name or target.name)
        formatter.info(translate(selections.language, "integrate_title", value=str(target)))
        integrator = Integrator(
            target,
            selections,
            overwrite=overwrite,
            verbose=verbose,
            config=SpecmentConfig.from_env(),
        )
        result = integrator.integrate()
    except UserCancelledError:
        return
    except (ValidationError, ConfigError) as e:
        _fail(collector.language, e)

    if result.conflicts:
        formatter.conflicts_table(result.conflicts, selections.language)
    if result.warnings:
        formatter.note(translate(selections.language, "warnings_title"), result.warnings)

    if not result.success:
        raise SystemExit(1)
    formatter.success(translate(selections.language, "integrate_done"))


if __name__ == "__main__":
    main()
