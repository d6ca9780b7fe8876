import asyncio, logging
from app.database.connection import (
    BLOG_COLLECTION, DESTINATION_COLLECTION, PACKAGE_COLLECTION, MongoConnection, ensure_indexes,
)
from app.database.sample_data import sample_blog_posts, sample_destinations, sample_packages
from app.models.blogPost import BlogPost
from app.models.destination import Destination
from app.models.tourPackage import TourPackage
from app.utils.crud_utils import utc_now

logger = logging.getLogger(__name__)

SEED_SETS = [
    (DESTINATION_COLLECTION, Destination, sample_destinations),
    (PACKAGE_COLLECTION, TourPackage, sample_packages),
    (BLOG_COLLECTION, BlogPost, sample_blog_posts),
]


async def seed_database(connection: MongoConnection) -> dict:
    """
    Replace the catalog collections with the bundled sample data.

    Every sample record goes through the same schema as the API write path,
    so the seeded documents look exactly like created ones.
    Returns the number of inserted documents per collection.
    """
    logger.info("Starting database seeding...")
    db = await connection.get_database()

    await asyncio.gather(*(db[name].delete_many({}) for name, _, _ in SEED_SETS))
    logger.info("Cleared existing data")

    summary = {}
    for name, model, samples in SEED_SETS:
        now = utc_now()
        documents = [
            {**model.model_validate(sample).model_dump(), "createdAt": now, "updatedAt": now}
            for sample in samples
        ]
        result = await db[name].insert_many(documents)
        summary[name] = len(result.inserted_ids)
        logger.info(f"Inserted {summary[name]} documents into {name}")

    await ensure_indexes(db)
    logger.info(f"Database seeding completed: {summary}")
    return summary
