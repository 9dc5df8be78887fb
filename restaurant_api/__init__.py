"""
Read-only restaurant and dish query API.

Responsibilities:
- Open the SQLite data source once at startup and share it across requests.
- Expose filter, sort and lookup queries over ``restaurants`` and ``dishes``.
- Map query outcomes to JSON responses (200 / 404 / 500).
"""

__version__ = "1.0.0"
