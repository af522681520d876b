# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER
# Description: External service clients module.
# ============================================================================
"""External Service Clients.

Components:
- EuropaVatClient: SOAP client for the EU VIES service
"""

from .europa import EuropaVatClient

__all__ = ["EuropaVatClient"]
