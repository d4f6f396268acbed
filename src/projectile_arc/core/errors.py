"""
Project: ProjectileArc
File Name: core/errors.py
Description:
    Exceptions raised by ProjectileArc.
"""

from __future__ import annotations


class ContractViolation(AssertionError):
    """A caller broke a precondition (programmer error).

    Raised before any state is changed or any object is spawned, and never
    repaired silently.
    """
