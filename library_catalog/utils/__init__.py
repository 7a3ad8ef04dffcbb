"""Library Catalog - Utilities Package

Helpers used by the interactive CLI:
- Output rendering (ui_helpers.py)
- Input validation (validators.py)
"""
