"""Dealer assignment domain module.

Decoding and encoding of the assignment metadata attached to the cart.
"""

from .models import Consultation, ConsultationType, ContactMethod, DealerAssignment
from .parser import MalformedAssignmentError, parse_assignment
from .encoder import ASSIGNMENT_DATA_KEY, CartAttribute, encode_assignment

__all__ = [
    "Consultation",
    "ConsultationType",
    "ContactMethod",
    "DealerAssignment",
    "MalformedAssignmentError",
    "parse_assignment",
    "ASSIGNMENT_DATA_KEY",
    "CartAttribute",
    "encode_assignment",
]
