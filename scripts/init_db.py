import logging

from catalog_api.db.engine import get_engine
from catalog_api.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

def main():
    engine = get_engine()
    # existing tables and their rows are left alone
    metadata.create_all(engine)
    logger.info("DB schema ensured at %s", engine.url)

if __name__ == "__main__":
    main()
