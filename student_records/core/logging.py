"""
Logging setup.

Every module logs through `logging.getLogger(__name__)`; this only decides
where the records go and at which level.
"""
import logging
import sys
from typing import Optional

from student_records.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    Args:
        level: Level name (e.g. "INFO"). Defaults to the settings value.
    """
    level_name = (level or get_settings().effective_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
