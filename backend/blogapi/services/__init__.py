"""Services — database-backed operations, one class per aggregate.

Invariants:
    - Services take an AsyncSession in __init__ and commit their own writes
    - Services raise BlogError subclasses; routes never build error responses
"""
