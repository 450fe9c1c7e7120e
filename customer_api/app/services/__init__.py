"""
Service layer abstraction.

``CustomerStore`` keeps customers in process memory.  Handlers only
depend on its public methods, so a persistent implementation could be
swapped in without touching the API routes.
"""
