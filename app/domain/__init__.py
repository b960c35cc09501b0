# app/domain/__init__.py

# 1. The Entity
from .customer import UNASSIGNED_ID, CustomerDomain

# 2. Shared Text Helpers
from .normalization import normalize, split_full_name


__all__ = [
    "UNASSIGNED_ID",
    "CustomerDomain",
    "normalize",
    "split_full_name"
]
