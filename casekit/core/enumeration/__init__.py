from .case_style import CaseStyle
from .registry_enum import RegistryEnum

__all__ = [
    "CaseStyle",
    "RegistryEnum",
]
