"""Central definitions of the principal roles known to the UPSTAC system.

The role set is closed; the documentation layer only reads it. Add a role here
and a label in ROLE_DESCRIPTIONS together, never one without the other.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict


class UserRole(Enum):
    DOCTOR = 'DOCTOR'
    TESTER = 'TESTER'
    GOVERNMENT_AUTHORITY = 'GOVERNMENT_AUTHORITY'
    USER = 'USER'


# Human labels shown next to each scope in the documentation UI
ROLE_DESCRIPTIONS: Dict[UserRole, str] = {
    UserRole.DOCTOR: 'Doctors',
    UserRole.TESTER: 'Testers',
    UserRole.GOVERNMENT_AUTHORITY: 'Government Authority',
    UserRole.USER: 'Registered users',
}

__all__ = ['UserRole', 'ROLE_DESCRIPTIONS']
