# scripts/init_db.py

import logging

from invoicing.config import DB_URL, LOG_FORMAT, LOG_LEVEL
from invoicing.db.engine import get_engine
from invoicing.db.schema import metadata

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def main():
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", DB_URL)

if __name__ == "__main__":
    main()
