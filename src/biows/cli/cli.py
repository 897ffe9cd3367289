"""Command-line interface for BioWS."""

import asyncio
import json
import logging

import click

from biows.config import get_settings
from biows.constants import DEFAULT_LIMIT
from biows.data_sources.fivefilters import FiveFiltersClient
from biows.data_sources.gbif import GBIFClient
from biows.data_sources.ncbi import NCBITaxonomyClient
from biows.data_sources.pubmed import PubMedClient
from biows.data_sources.wikipedia import WikipediaClient


async def _call(client, method: str, *args):
    async with client:
        return await getattr(client, method)(*args)


def _run(client, method: str, *args):
    return asyncio.run(_call(client, method, *args))


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.version_option(package_name="biows")
@click.option("-v", "--verbose", is_flag=True, help="Log every request")
def main(verbose: bool):
    """BioWS: query biodiversity and bibliographic web services."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def taxon(name: str, as_json: bool):
    """Look up NAME in the GBIF backbone taxonomy."""
    found, record = _run(GBIFClient(), "search", name)
    if as_json:
        _echo_json({"found": found, **record.model_dump(mode="json")})
    elif found:
        click.echo(f"{record.scientific_name} {record.authorship} [{record.key}]")
        click.echo(f"  status: {record.status.value if record.status else ''}")
        if record.valid_name:
            click.echo(f"  valid name: {record.valid_name}")
        for rank in ("kingdom", "phylum", "class_rank", "order", "family"):
            click.echo(f"  {rank.removesuffix('_rank')}: {getattr(record, rank)}")
    else:
        click.echo(f"No GBIF match for: {name}")
    if not found:
        raise SystemExit(1)


@main.command()
@click.argument("key", type=int)
def occurrences(key: int):
    """Print the number of GBIF occurrences for taxon KEY (-1 if unavailable)."""
    click.echo(_run(GBIFClient(), "occurrence_count", key))


@main.command()
@click.argument("term")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def ncbi(term: str, as_json: bool):
    """Summarise TERM from NCBI taxonomy with nucleotide/protein counts."""
    found, summary = _run(NCBITaxonomyClient(), "summary", term)
    if as_json:
        _echo_json({"found": found, **summary.model_dump()})
    elif found:
        click.echo(f"{summary.scientific_name} [taxid {summary.id}]")
        click.echo(f"  common name: {summary.common_name}")
        click.echo(f"  division: {summary.division}")
        click.echo(f"  nucleotide sequences: {summary.nucleotide_count}")
        click.echo(f"  protein sequences: {summary.protein_count}")
    else:
        click.echo(f"No NCBI taxonomy record for: {term}")
    if not found:
        raise SystemExit(1)


@main.command()
@click.argument("taxon_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def links(taxon_id: int, as_json: bool):
    """List NCBI LinkOut resources for TAXON_ID."""
    entries = _run(NCBITaxonomyClient(), "links", taxon_id)
    if as_json:
        _echo_json([e.model_dump() for e in entries])
        return
    for entry in entries:
        click.echo(f"{entry.provider_name}|{entry.url}")


@main.command()
@click.argument("term")
def wiki(term: str):
    """Print the Wikipedia summary for TERM."""
    click.echo(_run(WikipediaClient(), "snippet", term))


@main.command()
@click.argument("term")
@click.option("-n", "--limit", default=DEFAULT_LIMIT, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def images(term: str, limit: int, as_json: bool):
    """List JPEG image titles from the Wikipedia page for TERM."""
    titles = _run(WikipediaClient(), "images", term, limit)
    if as_json:
        _echo_json(titles)
        return
    for title in titles:
        click.echo(title)


@main.command()
@click.argument("text")
@click.option("-n", "--limit", default=DEFAULT_LIMIT, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def terms(text: str, limit: int, as_json: bool):
    """Extract significant terms from TEXT with FiveFilters."""
    found = _run(FiveFiltersClient(), "extract_terms", text, limit)
    if as_json:
        _echo_json(found)
        return
    for term in found:
        click.echo(term)


@main.command()
@click.argument("term")
@click.option("-n", "--limit", default=DEFAULT_LIMIT, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def pubmed(term: str, limit: int, as_json: bool):
    """Search PubMed for TERM and list titles with DOIs."""
    references = _run(PubMedClient(), "search", term, limit)
    if as_json:
        _echo_json([r.model_dump() for r in references])
        return
    for ref in references:
        click.echo(f"{ref.title}={ref.doi}")


if __name__ == "__main__":
    main()
