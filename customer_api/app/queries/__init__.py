"""
Query objects: read‑only requests for customers.
"""

from .customer import GetAllCustomersQuery, GetCustomerQuery

__all__ = ["GetAllCustomersQuery", "GetCustomerQuery"]
