"""
Service layer: the generation facade and the caller-owned history.
No persistence; history lives only as long as its owner.
"""
from .comp_service import CompService, generate_comp
from .history import CompHistory

__all__ = [
    "CompService",
    "generate_comp",
    "CompHistory",
]
