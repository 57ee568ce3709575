"""
Trainer repository demo.

Connects to MongoDB, stores a few trainers, lists them, looks one up and
deletes it by name, lists again, then drops the working database. Any
connection or repository failure stops the run with exit status 1.
"""

import asyncio
import logging
import sys
from typing import List

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from trainerdb.config.database import (
    close_database, create_client, drop_database, get_trainer_collection, init_database
)
from trainerdb.config.settings import Settings, configure_logging, get_settings
from trainerdb.exceptions import RepositoryError
from trainerdb.models.document_models import Trainer
from trainerdb.repositories.trainer_repository import TrainerRepository

logger = logging.getLogger(__name__)

DEMO_TRAINERS = [
    Trainer(name="Marcus", age=25, city="Nuporanga-SP"),
    Trainer(name="Leticia Presoto", age=25, city="Orlandia-SP"),
    Trainer(name="Magali", age=2, city="Uberlandia-SP"),
    Trainer(name="Cacau", age=1, city="Uberlandia-SP"),
]


async def run_demo(client: AsyncIOMotorClient, settings: Settings) -> List[Trainer]:
    """
    Run the save/find/delete sequence against the configured collection.

    Returns:
        List[Trainer]: Trainers left in the collection at the end
    """
    repository = TrainerRepository(get_trainer_collection(client, settings))

    for trainer in DEMO_TRAINERS:
        await repository.save(trainer)

    trainers = await repository.find_all(settings.find_all_limit)
    for trainer in trainers:
        logger.info(repr(trainer))

    marcus = await repository.find_by_name("Marcus")
    logger.info(f"Found by name: {marcus!r}")

    deleted = await repository.delete_by_name("Marcus")
    logger.info(f"Deleted {deleted} trainer(s) named Marcus")

    remaining = await repository.find_all(settings.find_all_limit)
    logger.info(f"{len(remaining)} trainer(s) remaining")
    return remaining


async def main() -> int:
    """Run the demo, returning the process exit status."""
    settings = get_settings()
    configure_logging(settings)
    client = create_client(settings)

    try:
        try:
            await init_database(client, settings)
        except PyMongoError as e:
            logger.error(f"Could not connect to {settings.mongodb_url}: {e}")
            return 1

        status = 0
        try:
            await run_demo(client, settings)
        except RepositoryError as e:
            logger.error(f"Demo stopped: {e}")
            status = 1

        try:
            await drop_database(client, settings)
        except PyMongoError as e:
            logger.error(f"Could not drop database '{settings.mongodb_database}': {e}")
            status = 1

        return status
    finally:
        await close_database(client)


def cli():
    """Console entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
