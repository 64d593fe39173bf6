"""
Repository layer initialization module.

`BaseRepository` serves every entity; the model-specific repositories only
add report queries on top of it.

Usage:
    from app.repositories import BaseRepository, LocalityRepository
"""

from .base_repository import BaseRepository
from .buyer_repository import BuyerRepository
from .employee_repository import EmployeeRepository
from .locality_repository import LocalityRepository
from .product_repository import ProductRepository
from .section_repository import SectionRepository

__all__ = [
    "BaseRepository",
    "BuyerRepository",
    "EmployeeRepository",
    "LocalityRepository",
    "ProductRepository",
    "SectionRepository",
]
