"""Portfolio API Package — projects, experience, profile and auth backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
