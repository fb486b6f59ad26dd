"""CLI entry point for ssz-test-gen."""

import logging

import click

from .category import Category
from .config import (
    DEFAULT_PROJECT_ROOT,
    DEFAULT_SRC_DIR,
    DEFAULT_TARGET_DIR,
    DEFAULT_WORKDIR_MARKER,
    Config,
)
from .exceptions import GeneratorError
from .generator import check_working_directory, generate_for


def setup_logging(level: str) -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.version_option(package_name="ssz-test-gen")
def cli():
    """ssz-test-gen - generate pytest modules from ssz_generic fixtures."""
    pass


@cli.command()
@click.argument("category", type=click.Choice(Category.tokens()))
@click.option(
    "--src-dir",
    default=DEFAULT_SRC_DIR,
    show_default=True,
    help="Root of the ssz_generic fixture corpus",
    envvar="SSZ_TEST_GEN_SRC_DIR",
)
@click.option(
    "--target-dir",
    default=DEFAULT_TARGET_DIR,
    show_default=True,
    help="Directory receiving the generated module and its data/ tree",
    envvar="SSZ_TEST_GEN_TARGET_DIR",
)
@click.option(
    "--project-root",
    default=DEFAULT_PROJECT_ROOT,
    show_default=True,
    help="Directory payload paths in generated tests are relative to",
    envvar="SSZ_TEST_GEN_PROJECT_ROOT",
)
@click.option(
    "--workdir-marker",
    default=DEFAULT_WORKDIR_MARKER,
    show_default=True,
    help="Name the current directory must contain",
    envvar="SSZ_TEST_GEN_WORKDIR_MARKER",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the generated module instead of writing files",
    envvar="SSZ_TEST_GEN_DRY_RUN",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
    envvar="SSZ_TEST_GEN_LOG_LEVEL",
)
def generate(
    category: str,
    src_dir: str,
    target_dir: str,
    project_root: str,
    workdir_marker: str,
    dry_run: bool,
    log_level: str,
):
    """Generate the test module for one fixture CATEGORY."""
    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    config = Config(
        src_dir=src_dir,
        target_dir=target_dir,
        project_root=project_root,
        workdir_marker=workdir_marker,
        dry_run=dry_run,
        log_level=log_level,
    )

    try:
        check_working_directory(config)
        result = generate_for(config, Category.from_token(category))
    except GeneratorError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if dry_run:
        click.echo(result.source)
    logger.info(f"Generated {result.case_count} {category} tests in {result.output_path}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
