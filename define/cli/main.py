"""Main CLI entry point for define."""

import argparse
import logging
import sys

from define import __version__
from define.cli.commands import define_word, list_sources, print_config
from define.config import (
    DEFAULT_CONFIG_FILE_LOCATION,
    DEFAULT_INDENTATION_SIZE,
    add_configuration_arguments,
    create_default_config,
    load_configuration,
)
from define.exceptions import DefineException
from define.presenters import ConsolePresenter
from define.registry import ProviderRegistry, create_default_registry


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the global flags.

    Provider flags are added later by the registry.
    """
    parser = argparse.ArgumentParser(
        prog="define",
        usage="%(prog)s [<options>...] <word>",
        description="A command-line dictionary (thesaurus)",
    )
    parser.add_argument("word", nargs="?", help="The word to define")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit",
    )
    parser.add_argument(
        "--list-sources",
        action="store_true",
        help="List the available sources and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    add_configuration_arguments(parser)

    return parser


def main(
    argv: list[str] | None = None,
    registry: ProviderRegistry | None = None,
    default_config_file_location: str | None = DEFAULT_CONFIG_FILE_LOCATION,
) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        registry: Provider registry (defaults to all built-in providers)
        default_config_file_location: Config file used when -c isn't given

    Returns:
        Exit code (0 = success, 1 = failure; usage errors exit with 2)
    """
    if registry is None:
        registry = create_default_registry()

    parser = build_parser()

    # Configure our registered providers
    provider_configs = registry.configure_providers(parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    presenter = ConsolePresenter(DEFAULT_INDENTATION_SIZE)

    if not provider_configs:
        presenter.show_error("no registered source providers")
        return 1

    try:
        config = load_configuration(
            args,
            registry,
            provider_configs,
            default_config_file_location,
            create_default_config(),
        )
    except DefineException as e:
        presenter.show_error(str(e))
        return 1

    # Re-create the presenter now that the indentation size is known
    presenter = ConsolePresenter(config.indentation_size)

    for provider_config in config.provider_config_list():
        registry.finalize(provider_config)

    if args.print_config:
        return print_config.print_config_command(config, presenter)

    if args.list_sources:
        return list_sources.list_sources_command(registry, presenter)

    if not args.word:
        parser.print_help(sys.stdout)
        return 1

    return define_word.define_word_command(args.word, config, registry, presenter)


if __name__ == "__main__":
    sys.exit(main())
