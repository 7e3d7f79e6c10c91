"""
Script to seed the catalog gender lookup table.
"""
import asyncio
import sys
from typing import Dict, Iterable

import click

from eshop.database import async_session_factory, init_db
from eshop.repositories.catalog_gender_repository import CatalogGenderRepository


DEFAULT_GENDERS = ("Women", "Men", "Unisex", "Kids")


async def seed_genders(
    genders: Iterable[str] = DEFAULT_GENDERS,
    session_factory=async_session_factory,
) -> Dict[str, int]:
    """
    Insert any missing gender values.

    Args:
        genders: Gender labels to ensure exist
        session_factory: Factory producing AsyncSession instances

    Returns:
        Counts of created and already existing rows
    """
    created_count = 0
    existing_count = 0

    async with session_factory() as session:
        try:
            repository = CatalogGenderRepository(session)

            for gender in genders:
                if await repository.get_by_name(gender):
                    existing_count += 1
                    continue
                await repository.create(gender=gender)
                created_count += 1

            await session.commit()
        except Exception:
            await session.rollback()
            raise

    return {"created": created_count, "existing": existing_count}


@click.command()
@click.option(
    "--create-tables",
    is_flag=True,
    help="Create missing tables before seeding (development only)"
)
@click.option(
    "--gender",
    "genders",
    multiple=True,
    help="Gender to seed; repeat for several. Defaults to the built-in list."
)
def main(create_tables: bool, genders: tuple):
    """Seed catalog genders in the database."""
    click.echo("Seeding catalog genders...")

    async def run() -> Dict[str, int]:
        if create_tables:
            await init_db()
        return await seed_genders(genders or DEFAULT_GENDERS)

    try:
        summary = asyncio.run(run())
    except Exception as e:
        click.echo(f"✗ Error seeding catalog genders: {e}", err=True)
        sys.exit(1)

    click.echo(f"\nSummary:")
    click.echo(f"  Created: {summary['created']}")
    click.echo(f"  Existing: {summary['existing']}")
    click.echo(f"\n✓ Catalog genders seeded successfully!")


if __name__ == "__main__":
    main()
