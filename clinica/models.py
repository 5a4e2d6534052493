from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base

# gli id sono INTEGER a 32 bit: valori fuori range non corrispondono a nessuna riga
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


class Cabinet(Base):
    __tablename__ = "cabinets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)

    doctors: Mapped[list["Doctor"]] = relationship(back_populates="cabinet")

    def __repr__(self) -> str:
        return f"Cabinet({self.number})"


class Specialization(Base):
    __tablename__ = "specializations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)

    doctors: Mapped[list["Doctor"]] = relationship(back_populates="specialization")

    def __repr__(self) -> str:
        return f"Specialization({self.name})"


class Estate(Base):
    """Distretto territoriale ("uchastok") a cui sono assegnati i pazienti."""
    __tablename__ = "estates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)

    doctors: Mapped[list["Doctor"]] = relationship(back_populates="estate")
    patients: Mapped[list["Patient"]] = relationship(back_populates="estate")

    def __repr__(self) -> str:
        return f"Estate({self.number})"


class Doctor(Base):
    __tablename__ = "doctors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)

    cabinet_id: Mapped[int] = mapped_column(ForeignKey("cabinets.id"), nullable=False)
    specialization_id: Mapped[int] = mapped_column(ForeignKey("specializations.id"), nullable=False)
    # opzionale: non tutti i medici coprono un distretto
    estate_id: Mapped[int | None] = mapped_column(ForeignKey("estates.id"), nullable=True)

    cabinet: Mapped["Cabinet"] = relationship(back_populates="doctors")
    specialization: Mapped["Specialization"] = relationship(back_populates="doctors")
    estate: Mapped[Estate | None] = relationship(back_populates="doctors")

    def __repr__(self) -> str:
        return f"Doctor({self.full_name})"


class Patient(Base):
    __tablename__ = "patients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    last_name: Mapped[str] = mapped_column(String(80), nullable=False)
    first_name: Mapped[str] = mapped_column(String(80), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(80), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)

    estate_id: Mapped[int] = mapped_column(ForeignKey("estates.id"), nullable=False)

    estate: Mapped["Estate"] = relationship(back_populates="patients")

    def __repr__(self) -> str:
        return f"Patient({self.last_name} {self.first_name})"
