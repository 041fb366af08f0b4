# Pydantic Models
from product_catalog.models.arguments import (
    ArgumentError,
    FlagResult,
    OutputFormat,
    ResolvedArguments,
)
from product_catalog.models.product import (
    EnrichedProduct,
    GroupedCatalog,
    Product,
    Rating,
)

__all__ = [
    # Product models
    "Product",
    "Rating",
    "EnrichedProduct",
    "GroupedCatalog",
    # Argument models
    "ArgumentError",
    "FlagResult",
    "OutputFormat",
    "ResolvedArguments",
]
