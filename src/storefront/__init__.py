"""
Storefront Client

Catalog browsing, product search, cart handling and login/registration
against a remote storefront REST API.
"""

__version__ = "0.1.0"
