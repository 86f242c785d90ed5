"""
Student Records - process startup.

Call startup() once before serving requests:
- configures logging
- registers every model (importing student_records.models)
- creates the unique indexes the models declare

Run: python -m student_records.main
"""

import logging

from student_records.core.config import get_settings
from student_records.core.logging import configure_logging
from student_records.db.mongodb import init_mongo_indexes, test_mongo_connection
from student_records.models import registered_models

logger = logging.getLogger(__name__)


def startup(create_indexes: bool = True) -> None:
    configure_logging()
    settings = get_settings()

    names = ", ".join(model.name for model in registered_models())
    logger.info("Models registered: %s", names)

    if create_indexes:
        init_mongo_indexes()
        logger.info("MongoDB indexes initialized on %s", settings.mongodb_db)


def main() -> int:
    configure_logging()
    if not test_mongo_connection():
        logger.error("MongoDB unreachable, indexes not created")
        return 1
    startup()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
