"""
User Model
==========

Domain model representing a user in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from typing import Optional
from dataclasses import dataclass


@dataclass
class User:
    """
    User domain model.
    
    A plain record: no invariants are enforced beyond the shape of the data.
    The id is optional on create; the store assigns one when it is absent.
    """
    name: str
    email: str
    id: Optional[str] = None
    
    def has_id(self) -> bool:
        """Check if the user already carries an identifier."""
        return bool(self.id)
