"""
Dish queries and routes, served under ``/dishes``.
"""
