"""
Доменная модель CRM.
"""

from src.crm.domain.model import Customer

__all__ = ["Customer"]
