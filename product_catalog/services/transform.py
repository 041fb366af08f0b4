"""
상품 변환 파이프라인
역직렬화 -> 가격 필터 -> 보강 -> 카테고리별 그룹/정렬
"""
import logging
import random
from typing import Dict, Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from product_catalog.exceptions import DeserializationError
from product_catalog.models.product import EnrichedProduct, GroupedCatalog, Product

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(List[Product])

# 할인율 (%) 범위
MIN_DISCOUNT_PCT = 5
MAX_DISCOUNT_PCT = 20
MAX_STOCK = 100
MAX_POPULARITY_PCT = 100


def parse_products(payload: str) -> List[Product]:
    """
    API 응답 JSON을 상품 목록으로 변환

    Raises:
        DeserializationError: JSON이 아니거나 상품 배열 형태가 아닌 경우 (null 포함)
    """
    try:
        products = _PRODUCT_LIST.validate_json(payload)
    except ValidationError as e:
        logger.error(f"[Transform] 역직렬화 실패: {e.error_count()}개 오류")
        raise DeserializationError(
            "Failed to deserialize JSON response into products."
        ) from e

    logger.info(f"[Transform] 상품 {len(products)}개 로드")
    return products


def filter_by_price_range(
    products: Iterable[Product],
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[Product]:
    """가격 범위 필터 (양 끝 포함, 각 경계는 선택)"""
    filtered = list(products)

    if min_price is not None:
        filtered = [p for p in filtered if p.price >= min_price]
        print(f"Filtered products with price >= {min_price}")

    if max_price is not None:
        filtered = [p for p in filtered if p.price <= max_price]
        print(f"Filtered products with price <= {max_price}")

    return filtered


def enrich_product(product: Product, rng: random.Random) -> EnrichedProduct:
    """단일 상품 보강 (할인가, 재고, 인기도)"""
    discount_pct = rng.randint(MIN_DISCOUNT_PCT, MAX_DISCOUNT_PCT)
    stock = rng.randint(0, MAX_STOCK)
    popularity_pct = rng.randint(0, MAX_POPULARITY_PCT)

    return EnrichedProduct(
        id=product.id,
        title=product.title,
        original_price=product.price,
        description=product.description,
        category=product.category,
        discounted_price=round(product.price * (1 - discount_pct / 100), 2),
        stock_availability=stock,
        popularity_score=round(product.price * popularity_pct / 100, 2),
    )


def enrich_products(
    products: Iterable[Product],
    rng: random.Random,
) -> List[EnrichedProduct]:
    """
    상품 목록 보강

    rng는 실행 전체에서 공유됩니다 (상품마다 다시 시드하지 않음).
    """
    return [enrich_product(p, rng) for p in products]


def group_and_sort(products: Iterable[EnrichedProduct]) -> GroupedCatalog:
    """카테고리별 그룹 후 원래 가격 내림차순 정렬 (동일 가격은 입력 순서 유지)"""
    groups: Dict[str, List[EnrichedProduct]] = {}
    for product in products:
        groups.setdefault(product.category, []).append(product)

    return {
        category: sorted(items, key=lambda p: p.original_price, reverse=True)
        for category, items in groups.items()
    }
