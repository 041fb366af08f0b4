"""
서비스 패키지
"""

from product_catalog.services.cache import ResponseCache
from product_catalog.services.exporters import export_catalog, get_exporter
from product_catalog.services.fetcher import ProductApiClient

__all__ = [
    "ResponseCache",
    "ProductApiClient",
    "export_catalog",
    "get_exporter",
]
