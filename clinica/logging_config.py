import logging
import sys

from clinica.config import LOG_LEVEL


class ContextFormatter(logging.Formatter):
    """Formatter che tollera l'assenza del campo opzionale ``resource``."""
    def format(self, record):
        if not hasattr(record, "resource"):
            record.resource = "-"
        return super().format(record)


def configure_logging(level: str = LOG_LEVEL) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [resource=%(resource)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level,
        handlers=[handler],
    )
