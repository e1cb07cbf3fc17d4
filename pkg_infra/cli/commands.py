#!/usr/bin/env python3
"""pkg-infra CLI - Main Entry Point.

Usage:
    pkg-infra <command> [PKG]

PKG is a package directory (or any directory inside one), or the path to
its DESCRIPTION file. Defaults to the current directory.

Commands:
    use-testthat     Add testthat testing infrastructure
    use-rstudio      Add an RStudio project file
    use-knitr        Set up knitr vignettes
    use-rcpp         Set up Rcpp native code
    use-travis       Add a Travis CI configuration
    list-features    Show which features a package already has
    help             Show this help message
"""

from __future__ import annotations

import sys

import click

from pkg_infra.core.errors import ScaffoldError
from pkg_infra.core.package import as_package
from pkg_infra.helpers.helpers_logging import print_info, print_skipped, print_success
from pkg_infra.scaffolding import ScaffoldFeature, ScaffoldOperation, load_feature_specs

# command name -> feature
FEATURE_COMMANDS: dict[str, ScaffoldFeature] = {
    "use-testthat": ScaffoldFeature.TEST_HARNESS,
    "use-rstudio": ScaffoldFeature.IDE_PROJECT,
    "use-knitr": ScaffoldFeature.DOC_GENERATION,
    "use-rcpp": ScaffoldFeature.NATIVE_EXTENSION,
    "use-travis": ScaffoldFeature.CONTINUOUS_INTEGRATION,
}

FEATURE_HELP: dict[ScaffoldFeature, str] = {
    ScaffoldFeature.TEST_HARNESS: "Add testthat testing infrastructure",
    ScaffoldFeature.IDE_PROJECT: "Add an RStudio project file",
    ScaffoldFeature.DOC_GENERATION: "Set up knitr vignettes",
    ScaffoldFeature.NATIVE_EXTENSION: "Set up Rcpp native code",
    ScaffoldFeature.CONTINUOUS_INTEGRATION: "Add a Travis CI configuration",
}

COMMAND_ALIASES: dict[str, str] = {
    "add-test-infrastructure": "use-testthat",
    "add-rstudio-project": "use-rstudio",
    "add-travis": "use-travis",
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print("Aliases:")
    for alias, canonical in COMMAND_ALIASES.items():
        print(f"  {alias:24} - alias for {canonical}")


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level pkg-infra command group."""
    if ctx.invoked_subcommand is None:
        print_help()
    return 0


def _make_feature_command(command_name: str, feature: ScaffoldFeature) -> click.Command:
    @click.command(name=command_name, help=FEATURE_HELP[feature])
    @click.argument("pkg", required=False, default=".", type=click.Path())
    def _cmd(pkg: str) -> int:
        ScaffoldOperation.for_feature(feature).run(pkg)
        return 0

    return _cmd


@click.command(name="list-features", help="Show which features a package already has")
@click.argument("pkg", required=False, default=".", type=click.Path())
def list_features_cmd(pkg: str) -> int:
    descriptor = as_package(pkg)
    specs = load_feature_specs()
    print_info(f"Package: {descriptor.name} ({descriptor.path})")
    for command_name, feature in FEATURE_COMMANDS.items():
        operation = ScaffoldOperation(specs[feature])
        if not operation.spec.sentinels:
            print_skipped(f"{command_name:14} {operation.spec.title} (can always be re-run)")
        elif operation.is_present(descriptor):
            print_success(f"{command_name:14} {operation.spec.title}")
        else:
            print_info(f"  {command_name:14} {operation.spec.title} (not present)")
    return 0


def _register_commands() -> None:
    for name, feature in FEATURE_COMMANDS.items():
        _click_cli.add_command(_make_feature_command(name, feature))

    for alias, canonical in COMMAND_ALIASES.items():
        _click_cli.add_command(_make_feature_command(alias, FEATURE_COMMANDS[canonical]))

    _click_cli.add_command(list_features_cmd)

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        result = _click_cli.main(
            args=args,
            prog_name="pkg-infra",
            standalone_mode=False,
        )
    except ScaffoldError as exc:
        exc.print_error()
        return 1
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
