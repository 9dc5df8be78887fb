"""
Seed data loader.

Responsibilities:
- Read restaurant and dish seed CSVs.
- Normalize boolean flag columns to INTEGER 0/1.
- Write both tables into the SQLite file the API reads from.
"""
