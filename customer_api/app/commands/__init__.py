"""
Command objects: requests that intend to change stored customers.
"""

from .customer import AddCustomerCommand, DeleteCustomerCommand, UpdateCustomerCommand

__all__ = ["AddCustomerCommand", "DeleteCustomerCommand", "UpdateCustomerCommand"]
