"""Errori di dominio, tradotti in codici HTTP da ``routers.error_boundary``."""
from __future__ import annotations


class ClinicError(Exception):
    pass


class NotFound(ClinicError):
    def __init__(self, entity: str, ident: int) -> None:
        super().__init__(f"{entity} {ident} not found")
        self.entity = entity
        self.ident = ident


class InvalidReference(ClinicError):
    """Una o più chiavi esterne non corrispondono a righe esistenti."""

    def __init__(self, refs: dict[str, int]) -> None:
        listed = ", ".join(f"{field}={value}" for field, value in refs.items())
        super().__init__(f"One or more provided IDs are invalid: {listed}")
        self.refs = refs


class IdentifierMismatch(ClinicError):
    def __init__(self, path_id: int, body_id: int | None) -> None:
        super().__init__(f"Path id {path_id} does not match body id {body_id}")
        self.path_id = path_id
        self.body_id = body_id


class PersistenceError(ClinicError):
    """Il database ha rifiutato il commit (vincoli, connessione persa, ...)."""
