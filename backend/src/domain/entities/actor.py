"""
Actor Domain Entity
The caller of a job operation as asserted by the upstream identity provider
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Actor:
    """Role plus, for employers, the employer profile id"""

    role: str
    employer_id: Optional[int] = None

    def __str__(self) -> str:
        if self.employer_id is not None:
            return f"Actor({self.role}#{self.employer_id})"
        return f"Actor({self.role})"
