from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

from clinica.errors import IdentifierMismatch, InvalidReference, NotFound, PersistenceError

log = logging.getLogger(__name__)

INTERNAL_ERROR = "An internal server error occurred. Please try again later."


@contextmanager
def error_boundary(action: str, resource: str, data_verb: str | None = None) -> Iterator[None]:
    """
    Traduce gli errori di dominio in risposte HTTP.
    Nessun dettaglio interno arriva al client: gli errori del DB e quelli
    imprevisti vengono solo loggati.
    """
    extra = {"resource": resource}
    try:
        yield
    except HTTPException:
        raise
    except NotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None
    except (InvalidReference, IdentifierMismatch) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    except PersistenceError:
        log.exception("An error occurred while %s.", action, extra=extra)
        detail = INTERNAL_ERROR
        if data_verb:
            detail = f"An error occurred while {data_verb} the data. Please try again later."
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail) from None
    except Exception:
        log.exception("An unexpected error occurred while %s.", action, extra=extra)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR) from None
