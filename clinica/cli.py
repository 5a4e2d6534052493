from __future__ import annotations

import argparse

from clinica import db
from clinica.db import db_session, init_db
from clinica.logging_config import configure_logging
from clinica.models import Cabinet, Estate, Specialization
from clinica.seed import seed_base
from clinica.services import DEFAULT_PAGE_SIZE, list_doctors, list_patients
from clinica.store import ClinicStore


def cmd_init(args: argparse.Namespace) -> None:
    init_db()
    seed_base()
    print("DB inizializzato e seed completato.")


def cmd_list(args: argparse.Namespace) -> None:
    with db_session() as s:
        store = ClinicStore(s)
        if args.entity == "doctors":
            for d in list_doctors(store, args.sort_by or "FullName", args.page, args.page_size):
                print(f"{d.id} | {d.full_name} | {d.specialization_name} | cab. {d.cabinet_number} | distr. {d.estate_number or '-'}")
        elif args.entity == "patients":
            for p in list_patients(store, args.sort_by or "LastName", args.page, args.page_size):
                print(f"{p.id} | {p.full_name} | {p.date_of_birth.isoformat()} | {p.gender} | distr. {p.estate_number or '-'}")
        elif args.entity == "cabinets":
            for c in store.cabinets.all():
                print(f"{c.id} | {c.number}")
        elif args.entity == "specializations":
            for sp in store.specializations.all():
                print(f"{sp.id} | {sp.name}")
        elif args.entity == "estates":
            for e in store.estates.all():
                print(f"{e.id} | {e.number}")


def _add(entity) -> None:
    with db_session() as s:
        s.add(entity)
        s.flush()
        print(f"Creato: {entity.id}")


def cmd_add_cabinet(args: argparse.Namespace) -> None:
    _add(Cabinet(number=args.number.strip()))


def cmd_add_specialization(args: argparse.Namespace) -> None:
    _add(Specialization(name=args.name.strip()))


def cmd_add_estate(args: argparse.Namespace) -> None:
    _add(Estate(number=args.number.strip()))


def cmd_db_path(args: argparse.Namespace) -> None:
    print("ENGINE URL:", db.engine.url)
    print("DB FILE   :", db.engine.url.database)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="clinica", description="CLI Clinica (manutenzione DB e dati di riferimento)")
    sub = p.add_subparsers(required=True)

    p_init = sub.add_parser("init", help="Crea DB e carica seed")
    p_init.set_defaults(func=cmd_init)

    p_list = sub.add_parser("list", help="Lista entità")
    p_list.add_argument("entity", choices=["doctors", "patients", "cabinets", "specializations", "estates"])
    p_list.add_argument("--sort-by", default=None, help="Solo doctors/patients: FullName, SpecializationName, LastName, DateOfBirth")
    p_list.add_argument("--page", type=int, default=1)
    p_list.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE)
    p_list.set_defaults(func=cmd_list)

    p_cab = sub.add_parser("add-cabinet", help="Crea studio")
    p_cab.add_argument("--number", required=True)
    p_cab.set_defaults(func=cmd_add_cabinet)

    p_spec = sub.add_parser("add-specialization", help="Crea specializzazione")
    p_spec.add_argument("--name", required=True)
    p_spec.set_defaults(func=cmd_add_specialization)

    p_est = sub.add_parser("add-estate", help="Crea distretto")
    p_est.add_argument("--number", required=True)
    p_est.set_defaults(func=cmd_add_estate)

    p_path = sub.add_parser("db-path", help="Mostra il DB in uso")
    p_path.set_defaults(func=cmd_db_path)

    return p


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    init_db()  # garantisce tabelle
    args.func(args)


if __name__ == "__main__":
    main()
