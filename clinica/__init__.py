"""
Backend applicativo Clinica.

Struttura:
- config.py   : variabili d'ambiente (.env)
- db.py       : engine e sessioni SQLAlchemy
- models.py   : modelli ORM (medici, pazienti, studi, specializzazioni, distretti)
- store.py    : accesso per richiesta (collezioni tipizzate, paginazione, commit)
- schemas.py  : DTO pydantic (lista / modifica)
- mappers.py  : conversioni entità <-> DTO
- services.py : operazioni CRUD su medici e pazienti
- routers/    : endpoint FastAPI
- seed.py     : dati di riferimento iniziali
- cli.py      : manutenzione da riga di comando
"""
