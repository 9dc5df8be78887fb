"""
Restaurant queries and routes.

Responsibilities:
- Read restaurant rows by id, cuisine, flag filter or rating order.
- Serve them under ``/restaurants``.
"""
