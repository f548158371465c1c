"""CLI interface for kraftpack package management."""

import sys
from typing import Callable, Dict, List, Optional, Tuple

import yaml

from .common.config import KraftPackConfig, default_config_path, load_typed_config
from .common.logger import setup_logger
from .packmanager import (
    CatalogQuery,
    Context,
    PackageManagerRegistry,
    PackManagerError,
    UmbrellaManager,
    load_managers,
)

USAGE = """Usage: python -m kraftpack <command> [argument]

Commands:
  formats                 List registered package formats
  update                  Refresh every package manager's catalog cache
  catalog [NAME]          List known packages, optionally filtered by name
  add-source SOURCE       Add a catalog source to every package manager
  remove-source SOURCE    Remove a catalog source from every package manager
  compatible SOURCE       Show which package manager handles SOURCE
"""


def _load_config() -> KraftPackConfig:
    """Load configuration, falling back to defaults when the file is absent."""
    try:
        return load_typed_config(default_config_path())
    except FileNotFoundError:
        return KraftPackConfig()


def build_umbrella(config: KraftPackConfig) -> UmbrellaManager:
    """Create a registry from configuration and wrap it in an umbrella."""
    registry = PackageManagerRegistry()
    load_managers(registry, config.packmanager.managers)
    return UmbrellaManager(registry, sort_by_key=config.packmanager.sort_by_key)


def _formats(umbrella: UmbrellaManager, ctx: Context, arg: Optional[str]) -> None:
    for key, manager in umbrella.registry.snapshot(sort_by_key=umbrella.sort_by_key).items():
        print(f"{key}\t{manager.format_name}")


def _update(umbrella: UmbrellaManager, ctx: Context, arg: Optional[str]) -> None:
    umbrella.update(ctx)


def _catalog(umbrella: UmbrellaManager, ctx: Context, arg: Optional[str]) -> None:
    for package in umbrella.catalog(ctx, CatalogQuery(name=arg)):
        print(package.name)


def _add_source(umbrella: UmbrellaManager, ctx: Context, arg: Optional[str]) -> None:
    umbrella.add_source(ctx, arg)


def _remove_source(umbrella: UmbrellaManager, ctx: Context, arg: Optional[str]) -> None:
    umbrella.remove_source(ctx, arg)


def _compatible(umbrella: UmbrellaManager, ctx: Context, arg: Optional[str]) -> None:
    print(umbrella.is_compatible(ctx, arg).format_name)


CommandFn = Callable[[UmbrellaManager, Context, Optional[str]], None]

# command -> (handler, argument required)
COMMANDS: Dict[str, Tuple[CommandFn, bool]] = {
    "formats": (_formats, False),
    "update": (_update, False),
    "catalog": (_catalog, False),
    "add-source": (_add_source, True),
    "remove-source": (_remove_source, True),
    "compatible": (_compatible, True),
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the kraftpack CLI."""
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in COMMANDS:
        print(USAGE, file=sys.stderr)
        return 1

    command, arg = args[0], (args[1] if len(args) > 1 else None)
    handler, needs_arg = COMMANDS[command]
    if needs_arg and not arg:
        print(f"Error: {command} requires an argument", file=sys.stderr)
        return 1

    try:
        config = _load_config()
        logger = setup_logger(
            "kraftpack",
            log_dir=config.logging.log_dir,
            level=config.logging.level,
            file_logging=config.logging.file_logging,
            console_logging=config.logging.console_logging,
        )
        umbrella = build_umbrella(config)
        handler(umbrella, Context(logger=logger), arg)
    except (
        PackManagerError,
        RuntimeError,
        OSError,
        ValueError,
        TypeError,
        yaml.YAMLError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
