"""
In‑memory data store for customers.

The store owns a plain list of :class:`Customer` instances and performs
every lookup as a linear scan.  Instances are handed out by reference:
an update overwrites the fields of the stored object, so callers holding
that object observe the change.

Every public method runs under a single lock, which makes concurrent
callers (for example a threaded test client or a sync route executed in
the threadpool) serialize instead of racing on the list.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from customer_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)


class DuplicateCustomerIdError(ValueError):
    """A customer with the same id is already stored."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer {customer_id} already exists")
        self.customer_id = customer_id


# (id, first name, last name, revenue) of the customers present at startup.
SEED_CUSTOMERS = (
    (1, "Bill", "Gates", 100000),
    (2, "Steve", "Ballmer", 200000),
    (3, "Satya", "Nadella", 300000),
    (4, "David", "Giard", 400000),
)


class CustomerStore:
    """Authoritative in‑memory collection of customers."""

    def __init__(self, customers: Optional[Iterable[Customer]] = None) -> None:
        self._lock = threading.Lock()
        self._customers: List[Customer] = []
        if customers is not None:
            self.seed(customers)

    @classmethod
    def with_seed_data(cls) -> "CustomerStore":
        """Return a store holding fresh copies of the four sample customers."""
        store = cls()
        store.seed(
            Customer(id=cid, first_name=first, last_name=last, revenue=revenue)
            for cid, first, last, revenue in SEED_CUSTOMERS
        )
        return store

    def seed(self, customers: Iterable[Customer]) -> None:
        """Append ``customers`` as given, without assigning identifiers.

        Raises :class:`DuplicateCustomerIdError` if an id is already stored
        or repeated in ``customers``; nothing is appended in that case.
        """
        customers = list(customers)
        with self._lock:
            seen = {c.id for c in self._customers}
            for customer in customers:
                if customer.id in seen:
                    raise DuplicateCustomerIdError(customer.id)
                seen.add(customer.id)
            self._customers.extend(customers)
            logger.info("Seeded customer store with %d customers", len(self._customers))

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def list_all(self) -> List[Customer]:
        """Return all customers in insertion order.

        The returned list is a new list object, but its elements are the
        stored instances.
        """
        with self._lock:
            return list(self._customers)

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Return the first customer with ``customer_id`` or ``None``."""
        with self._lock:
            return self._find(customer_id)

    def add(self, customer: Customer) -> Customer:
        """Store ``customer`` and return it.

        A customer with ``id == 0`` is assigned the highest stored id plus
        one, or ``1`` when the store is empty.  A non‑zero id is kept as
        given and must not be stored yet, otherwise
        :class:`DuplicateCustomerIdError` is raised and the store is left
        unchanged.
        """
        with self._lock:
            if customer.id == 0:
                customer.id = max((c.id for c in self._customers), default=0) + 1
            elif self._find(customer.id) is not None:
                raise DuplicateCustomerIdError(customer.id)
            self._customers.append(customer)
        logger.info("Added customer %s", customer.id)
        return customer

    def add_customer(self, first_name: Optional[str], last_name: Optional[str], revenue: float = 0) -> Customer:
        """Create a customer from its fields and store it with a new id."""
        return self.add(Customer(first_name=first_name, last_name=last_name, revenue=revenue))

    def update(self, customer: Customer) -> Optional[Customer]:
        """Overwrite the stored customer with the same id.

        Returns the stored instance after the update, or ``None`` when no
        customer has that id (the store is left untouched).
        """
        with self._lock:
            stored = self._find(customer.id)
            if stored is None:
                return None
            stored.first_name = customer.first_name
            stored.last_name = customer.last_name
            stored.revenue = customer.revenue
        logger.info("Updated customer %s", stored.id)
        return stored

    def delete(self, customer_id: int) -> None:
        """Remove the customer with ``customer_id``; no‑op if it is absent."""
        with self._lock:
            stored = self._find(customer_id)
            if stored is None:
                return
            self._remove(stored)
        logger.info("Deleted customer %s", customer_id)

    def delete_customer(self, customer: Customer) -> None:
        """Remove this exact instance; no‑op if it is not stored."""
        with self._lock:
            if not self._remove(customer):
                return
        logger.info("Deleted customer %s", customer.id)

    def _find(self, customer_id: int) -> Optional[Customer]:
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def _remove(self, customer: Customer) -> bool:
        # Identity, not equality: two customers may share field values.
        for index, stored in enumerate(self._customers):
            if stored is customer:
                del self._customers[index]
                return True
        return False
