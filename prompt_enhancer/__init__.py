"""Prompt Enhancer: rewrites free-form prompts into hallucination-resistant prompts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
