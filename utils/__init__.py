"""Library App - Utility Package

Helpers shared by the catalog core and the CLI:
- Key normalization and id generation (normalizer.py)
- Input format checks (validators.py)
- Output rendering for the CLI (ui_helpers.py)
"""
