"""Core Layer: pure classification-and-synthesis pipeline, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure, deterministic and total over string input
    - Pattern and text tables are read-only module constants

Design Decisions:
    - Functional core separated from the transport shells (MCP, HTTP, CLI)
"""
