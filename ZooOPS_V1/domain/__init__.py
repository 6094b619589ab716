"""
Domain objects for ZooOPS.

The domain layer holds the business objects that model animals,
enclosures, staff, loans and the zoo aggregate.  These classes are
plain dataclasses (or Pydantic models) to ease unit testing and avoid
any side effects.
"""

from .animal import Animal
from .enclosure import Enclosure
from .loan import Loan
from .staff import Role, Worker
from .types import Climate, DaySummary, Diet, Sex, SpecialVisitor

__all__ = [
    "Animal",
    "Enclosure",
    "Loan",
    "Role",
    "Worker",
    "Climate",
    "DaySummary",
    "Diet",
    "Sex",
    "SpecialVisitor",
]
