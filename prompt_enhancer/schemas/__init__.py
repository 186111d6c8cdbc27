"""Pydantic Schemas: request/response validation for tool boundaries.

Invariants:
    - Schemas validate at system boundary (MCP arguments, HTTP bodies, CLI input)
    - Domain types from core/ used for enum fields
"""
