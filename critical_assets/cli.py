"""Command-line interface for critical-assets."""

import json
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
from loguru import logger

from critical_assets.bundler import AssetBundler
from critical_assets.compressor import StyleCompressor
from critical_assets.config_loader import build_asset_options, get_assets_config, get_logging_config, load_config
from critical_assets.models import Scope
from critical_assets.scanner import scan_stylesheets_directory


def setup_logging(config: dict):
    """Setup logging configuration."""
    log_config = get_logging_config(config)
    level = log_config.get("level", "INFO")

    logger.enable("critical_assets")
    logger.remove()
    # stderr keeps command output (scan JSON) clean on stdout
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
    )

    log_file = log_config.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level,
            rotation=log_config.get("rotation", "1 week"),
            retention=log_config.get("retention", "1 month"),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message}",
        )


@click.group()
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool):
    """critical-assets - merge critical and async stylesheets for a static site."""
    ctx.ensure_object(dict)

    try:
        cfg = load_config(config)
        if verbose:
            cfg.setdefault("logging", {})["level"] = "DEBUG"
        ctx.obj["config"] = cfg
        ctx.obj["config_path"] = config

        setup_logging(cfg)

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False))
@click.option("--ext", "extensions", multiple=True, help="Extra stylesheet extension (repeatable)")
@click.pass_context
def scan(ctx, directory: str, extensions: Tuple[str, ...]):
    """Show how a stylesheet directory maps to scopes and categories."""
    assets = get_assets_config(ctx.obj["config"])
    options = build_asset_options({
        **assets,
        "file_extensions": list(assets.get("file_extensions") or []) + list(extensions),
    })

    try:
        stylesheets = scan_stylesheets_directory(directory, options.file_extensions)
        payload = {scope.value: categories for scope, categories in stylesheets.items()}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    except Exception as e:
        logger.exception("Stylesheet scan failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--includes-dir", default="_includes", show_default=True, type=click.Path(file_okay=False),
              help="Template includes directory holding the components folder")
@click.option("--site-dir", default="_site", show_default=True, type=click.Path(file_okay=False),
              help="Site output directory")
@click.option("--category", default=None, help="Only bundle stylesheets of this category")
@click.option("--production/--development", "production", default=None,
              help="Force minified or beautified output (default: from SITE_ENV)")
@click.pass_context
def bundle(ctx, includes_dir: str, site_dir: str, category: Optional[str], production: Optional[bool]):
    """Scan the components directory and write critical.css and async.css."""
    config = ctx.obj["config"]

    try:
        compressor = StyleCompressor(production)
        bundler = AssetBundler.from_config(config, compressor=compressor)
        components_dir = Path(includes_dir) / bundler.options.components_dir
        output_dir = Path(site_dir) / bundler.options.output_dir.lstrip("/")

        bundler.add_stylesheets_directory(components_dir)

        written: Dict[str, Path] = {}
        for scope in Scope:
            if not bundler.resolver.stylesheet_paths(scope, category):
                logger.info("No {} stylesheets found (category={}), skipping", scope, category)
                continue
            css = bundler.get_styles(scope, category=category)
            output_dir.mkdir(parents=True, exist_ok=True)
            path = output_dir / f"{scope.value}.css"
            path.write_text(css, encoding="utf-8")
            logger.info("Wrote {} ({} bytes)", path, len(css))
            written[scope.value] = path

        click.echo(f"\n{'='*60}")
        click.echo(f"BUNDLE COMPLETE ({compressor.mode})")
        click.echo(f"{'='*60}")
        if not written:
            click.echo(f"No stylesheets found in {components_dir}")
        for scope_name, path in written.items():
            click.echo(f"{scope_name:<10} {path}")

    except Exception as e:
        logger.exception("Bundle failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
