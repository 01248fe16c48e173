"""
Contract schemas for inbound operations.

Each schema module registers its contracts on import.
Import all schema modules here to auto-register contracts.
"""

# Import schema modules to auto-register contracts
from . import companies
from . import meetings
from . import gateway
from . import action_items
from . import resolutions
from . import documents
from . import financials
from . import okrs
from . import roles

__all__ = [
    'companies', 'meetings', 'gateway', 'action_items', 'resolutions',
    'documents', 'financials', 'okrs', 'roles',
]
