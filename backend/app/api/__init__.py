"""API Layer — FastAPI routes, auth dependency and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the {"success": ..., "data" | "message" | "error": ...} envelope

Design Decisions:
    - Thin routes delegate ordering to services/display_order_manager.py
"""
