from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from sitemap_store.config import ConfigError, DocumentConfig, load_config
from sitemap_store.documents import SitemapDocument, open_document
from sitemap_store.errors import SitemapError
from sitemap_store.observability import configure_logging, get_logger
from sitemap_store.xml import Schema, Validator

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)

ConfigOption = Annotated[Path | None, typer.Option("-c", "--config", help="TOML file with a [sitemap] table")]
IndexOption = Annotated[bool, typer.Option("--index", help="Treat PATH as a sitemap index")]
ValidateOption = Annotated[bool, typer.Option("--validate/--no-validate", help="Check the XSD before loading")]


def _build_config(config_path: Path | None) -> DocumentConfig:
    if config_path is None:
        return DocumentConfig()
    return load_config(config_path)


@app.command()
def add(
    path: Annotated[Path, typer.Argument()],
    urls: Annotated[list[str], typer.Argument()],
    index: IndexOption = False,
    config: ConfigOption = None,
    validate: ValidateOption = True,
) -> None:
    """Load PATH, add URLS and flush it back."""
    configure_logging()
    rejected: list[str] = []
    try:
        document = open_document(path, _build_config(config), index=index)
        document.load(validate)
        for raw in urls:
            if not document.add_url(raw):
                rejected.append(raw)
        document.flush()
    except (ConfigError, SitemapError) as exc:
        logger.error("add_failed", path=str(path), error=str(exc))
        raise typer.Exit(code=1) from exc

    if rejected:
        logger.warning("sitemap_full", path=str(path), rejected=rejected)
        raise typer.Exit(code=1)
    logger.info("urls_added", path=str(path), count=len(urls))


@app.command()
def delete(
    path: Annotated[Path, typer.Argument()],
    urls: Annotated[list[str], typer.Argument()],
    config: ConfigOption = None,
    validate: ValidateOption = True,
) -> None:
    """Remove URLS from the plain sitemap at PATH."""
    configure_logging()
    try:
        document = SitemapDocument(path, _build_config(config))
        document.load(validate)
        missing = [raw for raw in urls if not document.delete_url(raw)]
        document.flush()
    except (ConfigError, SitemapError) as exc:
        logger.error("delete_failed", path=str(path), error=str(exc))
        raise typer.Exit(code=1) from exc

    if missing:
        logger.warning("urls_not_found", path=str(path), urls=missing)
    logger.info("urls_deleted", path=str(path), count=len(urls) - len(missing))


@app.command("validate")
def validate_file(
    path: Annotated[Path, typer.Argument()],
    index: IndexOption = False,
) -> None:
    """Check PATH against the sitemaps.org schema."""
    configure_logging()
    validator = Validator(Schema.SITEMAPINDEX if index else Schema.URLSET)
    try:
        validator.validate(path)
    except SitemapError as exc:
        logger.error("validation_failed", path=str(path), error=str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(f"{path}: valid")


@app.command()
def show(
    path: Annotated[Path, typer.Argument()],
    index: IndexOption = False,
    config: ConfigOption = None,
    validate: ValidateOption = True,
) -> None:
    """Print every loc held by PATH in document order."""
    configure_logging()
    try:
        document = open_document(path, _build_config(config), index=index)
        document.load(validate)
    except (ConfigError, SitemapError) as exc:
        logger.error("load_failed", path=str(path), error=str(exc))
        raise typer.Exit(code=1) from exc
    for url in document.urls():
        typer.echo(url.loc)


if __name__ == "__main__":
    app()
