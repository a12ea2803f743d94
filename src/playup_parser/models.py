"""
Data models for the Play UP Invoice Parser.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple, Any


@dataclass(frozen=True)
class SizeVocabulary:
    """Ordered size labels that a table's quantity columns refer to."""
    name: str
    labels: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.labels)

    def __bool__(self) -> bool:
        return bool(self.labels)


# Active vocabulary before any table header has been seen
EMPTY_VOCABULARY = SizeVocabulary(name="none", labels=())


@dataclass(frozen=True)
class ProductHeader:
    """Article/color/description triple announcing a product."""
    article: str
    color_code: str
    description: str


@dataclass(frozen=True)
class QuantityRow:
    """A located quantity line together with its unit price."""
    line: str
    tokens: Tuple[str, ...]
    unit_price: Decimal
    line_index: int


@dataclass(frozen=True)
class OutputRow:
    """One (product, size) pair with a positive quantity."""
    article: str
    color_code: str
    description: str
    size: str
    quantity: int
    price: Decimal


@dataclass
class ParsedProduct:
    """A product header paired with its per-size quantities; not mutated after parsing."""
    article: str
    color_code: str
    description: str
    sizes: Dict[str, int]
    price: Decimal

    def rows(self) -> List[OutputRow]:
        return [
            OutputRow(
                article=self.article,
                color_code=self.color_code,
                description=self.description,
                size=size,
                quantity=quantity,
                price=self.price,
            )
            for size, quantity in self.sizes.items()
            if quantity > 0
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "article": self.article,
            "color": self.color_code,
            "description": self.description,
            "sizes": dict(self.sizes),
            "price": str(self.price),
        }


@dataclass
class ParseResult:
    """Outcome of parsing one invoice document."""
    products: List[ParsedProduct]
    csv: str
    variant_count: int
    line_count: int = 0
    debug_text: Optional[str] = None

    @property
    def success(self) -> bool:
        return len(self.products) > 0

    @property
    def product_count(self) -> int:
        return len(self.products)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "success": self.success,
            "csv": self.csv,
            "productCount": self.product_count,
            "variantCount": self.variant_count,
            "products": [product.to_dict() for product in self.products],
        }
        if not self.success:
            result["debugText"] = self.debug_text
            result["error"] = "No products found in PDF"
        return result
