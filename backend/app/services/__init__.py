"""Services Layer — imperative shell that runs core rules against the database.

Invariants:
    - Services take an AsyncSession; they never open their own engine
    - Transaction boundaries documented per method (flush vs commit)
"""
