"""Połączenie z bazą PostgreSQL — konfiguracja przez zmienne środowiskowe (.env opcjonalnie)."""

from __future__ import annotations

import os
import pathlib

import psycopg2
from dotenv import load_dotenv

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")


def get_connection() -> psycopg2.extensions.connection:
    return psycopg2.connect(
        host     = os.getenv("PGHOST",     "localhost"),
        port     = int(os.getenv("PGPORT", "5432")),
        dbname   = os.getenv("PGDATABASE", "vacations"),
        user     = os.getenv("PGUSER",     "vacations"),
        password = os.getenv("PGPASSWORD", "vacations"),
    )
