"""
诊断命令：将十进制的访问标志值转换为 Java 源码中的修饰符
"""

import logging

import click

from metasequoia_classfile import __version__
from metasequoia_classfile.flags import DOMAINS, FlagSet, UnknownFlagError, get_domain

__all__ = [
    "main"
]


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="metasequoia-classfile-flags")
@click.argument("value", type=click.INT)
@click.option("-d", "--domain", "domain_name", type=click.Choice(list(DOMAINS)), default="field",
              show_default=True, help="Flag domain used to render VALUE.")
@click.option("--strict", is_flag=True, help="Reject bits outside the domain instead of ignoring them.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
def main(value: int, domain_name: str, strict: bool, verbose: bool) -> None:
    """Print the source modifiers for the access flags VALUE, e.g. 25 -> public static final."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        flag_set = FlagSet(value, get_domain(domain_name), strict=strict)
    except UnknownFlagError as e:
        raise click.ClickException(str(e)) from e
    click.echo(flag_set.canonical_name())
