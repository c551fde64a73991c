"""Infrastructure Layer — document store access and logging setup.

Invariants:
    - Only this package imports the Motor / pymongo driver (bson ids aside)
"""
