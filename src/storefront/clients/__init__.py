"""
Storefront API Clients

Outbound clients for the storefront REST API.
"""

from storefront.clients.base_client import BaseClient
from storefront.clients.auth_client import AuthClient
from storefront.clients.catalog_client import CatalogClient
from storefront.clients.cart_client import CartClient

__all__ = [
    "BaseClient",
    "AuthClient",
    "CatalogClient",
    "CartClient",
]
