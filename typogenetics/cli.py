"""
Command-line interface for typogenetics.
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import CONFIG_TEMPLATE, SimulationConfig, parse_strand_input
from .core.selection import SelectionPolicy

POLICY_CHOICES = [p.value for p in SelectionPolicy]


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def _load_config(config, policy, nth, seed) -> SimulationConfig:
    """Build a SimulationConfig from an optional YAML file plus CLI overrides."""
    settings = SimulationConfig.from_yaml(Path(config)) if config else SimulationConfig()

    if policy is not None:
        settings.selection_policy = SelectionPolicy.parse(policy)
    if nth is not None:
        if nth < 0:
            raise ValueError(f"--nth must be non-negative, got {nth}")
        settings.nth = nth
    if seed is not None:
        settings.seed = seed

    return settings


def selection_options(f):
    """Options shared by commands that apply enzymes."""
    f = click.option('--seed', type=int, default=None,
                     help='Seed for the random binding policy')(f)
    f = click.option('--nth', '-n', type=int, default=None,
                     help='Binding site index for nth_or_last (0-based)')(f)
    f = click.option('--policy', '-p', type=click.Choice(POLICY_CHOICES), default=None,
                     help='Binding site selection policy (default: random)')(f)
    f = click.option('--config', '-c', type=click.Path(exists=True), default=None,
                     help='YAML configuration file')(f)
    f = click.option('--verbose', '-v', is_flag=True,
                     help='Log every binding and run')(f)
    return f


@click.group()
@click.version_option(version=__version__)
def cli():
    """Typogenetics: strands, enzymes and the ribosome."""
    pass


@cli.command()
@click.argument('strand', type=str)
@click.option('--verbose', '-v', is_flag=True, help='Log each enzyme as it is translated')
def translate(strand, verbose):
    """
    List the enzymes coded by STRAND.

    STRAND can be letters (ACGT) or a path to a FASTA-style file.

    \b
    Example:
      typogenetics translate TAGATCCAGTCCATCGA
    """
    from .core.ribosome import translate as translate_strand

    _setup_logging(verbose)

    try:
        parsed = parse_strand_input(strand)
    except ValueError as e:
        click.echo(f"Error loading strand: {e}", err=True)
        sys.exit(1)

    enzymes = translate_strand(parsed)
    if not enzymes:
        click.echo("No enzymes coded in strand")
        return

    for i, enzyme in enumerate(enzymes):
        click.echo(f"{i}\t{enzyme.name}")


@cli.command()
@click.argument('strand', type=str)
@click.option('--enzymes-from', '-e', type=str, default=None,
              help='Translate enzymes from this strand instead of STRAND')
@click.option('--index', '-i', type=int, default=0,
              help='Index of the enzyme to apply (default: 0)')
@click.option('--all', 'apply_all', is_flag=True,
              help='Apply every coded enzyme, each to a fresh copy of STRAND')
@selection_options
def process(strand, enzymes_from, index, apply_all, verbose, config, policy, nth, seed):
    """
    Apply enzymes to STRAND and print the resulting strands.

    By default the enzymes are translated from STRAND itself.

    \b
    Example:
      typogenetics process TAGATCCAGTCCATCGA --policy always_first
      typogenetics process ACGTACGT -e CGCACAAACT --all
    """
    from .core.enzyme import process as process_strand
    from .core.ribosome import translate as translate_strand

    _setup_logging(verbose)

    try:
        settings = _load_config(config, policy, nth, seed)
        selector = settings.make_selector()
        target = parse_strand_input(strand)
        source = parse_strand_input(enzymes_from) if enzymes_from else target
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    enzymes = translate_strand(source)
    if not enzymes:
        click.echo(f"No enzymes coded in strand {source}", err=True)
        sys.exit(1)

    if apply_all:
        chosen = enzymes
    else:
        if not 0 <= index < len(enzymes):
            click.echo(f"Error: enzyme index {index} out of range (0-{len(enzymes) - 1})", err=True)
            sys.exit(1)
        chosen = [enzymes[index]]

    for enzyme in chosen:
        products = process_strand(target, enzyme, selector)
        click.echo(f"{enzyme.name}\t" + ' '.join(str(p) for p in products))


@cli.command()
@click.argument('strand_key', type=click.Path(exists=True))
@selection_options
def batch(strand_key, verbose, config, policy, nth, seed):
    """
    Translate every strand in STRAND_KEY and apply each enzyme to its own strand.

    STRAND_KEY is a TSV file with strand_id and strand columns.

    \b
    Example:
      typogenetics batch strands.tsv --policy always_first
    """
    from .core.enzyme import process as process_strand
    from .core.ribosome import translate as translate_strand
    from .io.output import ProcessResult, results_to_frame
    from .io.strand_key import load_strand_key

    _setup_logging(verbose)

    try:
        settings = _load_config(config, policy, nth, seed)
        selector = settings.make_selector()
        records = load_strand_key(Path(strand_key))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    results = []
    for record in records:
        for enzyme in translate_strand(record.strand):
            products = process_strand(record.strand, enzyme, selector)
            results.append(ProcessResult(record.strand_id, record.strand, enzyme, products))

    if not results:
        click.echo("No enzymes coded in any strand")
        return

    df = results_to_frame(results)
    click.echo(df.to_string(index=False))
    click.echo(f"\nProcessed {len(records)} strands, {len(results)} enzyme runs")


@cli.command()
def codons():
    """Print the genetic code."""
    from .core.ribosome import CODON_TABLE

    for codon in CODON_TABLE.values():
        click.echo(str(codon))


@cli.command()
@click.option('--output', '-o', type=click.Path(), default='typogenetics.yaml',
              help='Output config file path')
def init(output):
    """Generate a template configuration file."""
    with open(output, 'w') as f:
        f.write(CONFIG_TEMPLATE)

    click.echo(f"Generated configuration template: {output}")
    click.echo("\nEdit this file and run:")
    click.echo(f"  typogenetics process STRAND --config {output}")


if __name__ == '__main__':
    cli()
