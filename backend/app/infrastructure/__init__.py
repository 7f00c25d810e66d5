"""Infrastructure Layer — database engine, logging, credentials.

Invariants:
    - Infrastructure may import core/errors.py, never services/ or api/
    - Library exceptions (SQLAlchemy, PyJWT) are mapped to PortfolioError subclasses here
"""
