"""Services Layer: pipeline orchestration, tool definitions and tool dispatch.

Invariants:
    - One module per tool operation (enhance, classify, diff)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)
"""
