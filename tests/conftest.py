"""
pytest 공통 fixture
"""
import json
from typing import Callable, List

import httpx
import pytest

from product_catalog.config import Settings
from product_catalog.models.product import Product

API_URL = "https://fakestoreapi.com/products"

SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "title": "Fjallraven - Foldsack No. 1 Backpack, Fits 15 Laptops",
        "price": 109.95,
        "description": "Your perfect pack for everyday use and walks in the forest.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 2,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 22.3,
        "description": "Slim-fitting style, contrast raglan long sleeve.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "rating": {"rate": 4.1, "count": 259},
    },
    {
        "id": 5,
        "title": "John Hardy Women's Legends Naga Gold & Silver Dragon Station Chain Bracelet",
        "price": 695,
        "description": "From our Legends Collection.",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/71pWzhdJNwL._AC_UL640_QL65_ML3_.jpg",
        "rating": {"rate": 4.6, "count": 400},
    },
    {
        "id": 3,
        "title": "Mens Cotton Jacket",
        "price": 55.99,
        "description": "Great outerwear jackets for Spring/Autumn/Winter.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
        "rating": {"rate": 4.7, "count": 500},
    },
    {
        "id": 9,
        "title": "WD 2TB Elements Portable External Hard Drive - USB 3.0",
        "price": 64,
        "description": "USB 3.0 and USB 2.0 compatibility.",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "rating": {"rate": 3.3, "count": 203},
    },
    {
        "id": 6,
        "title": "Solid Gold Petite Micropave",
        "price": 168,
        "description": "Satisfaction Guaranteed.",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_.jpg",
        "rating": {"rate": 3.9, "count": 70},
    },
    {
        "id": 10,
        "title": "SanDisk SSD PLUS 1TB Internal SSD - SATA III 6 Gb/s",
        "price": 109,
        "description": "Easy upgrade for faster boot up.",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61U7T1koQqL._AC_SX679_.jpg",
        "rating": {"rate": 2.9, "count": 470},
    },
]


def make_product(product_id: int, price: float, category: str = "misc") -> Product:
    """테스트용 상품 생성"""
    return Product(id=product_id, title=f"Product {product_id}", price=price, category=category)


@pytest.fixture
def sample_payload() -> str:
    """상품 API 샘플 응답"""
    return json.dumps(SAMPLE_PRODUCTS)


@pytest.fixture
def sample_products() -> List[Product]:
    """샘플 상품 목록"""
    return [Product.model_validate(item) for item in SAMPLE_PRODUCTS]


@pytest.fixture
def priced_products() -> List[Product]:
    """가격 5, 10, 25, 50, 75 상품"""
    return [make_product(i, price) for i, price in enumerate([5, 10, 25, 50, 75], start=1)]


@pytest.fixture
def settings(tmp_path) -> Settings:
    """임시 디렉토리를 쓰는 설정 (재시도 대기 없음)"""
    return Settings(
        _env_file=None,
        api_url=API_URL,
        max_retries=3,
        retry_delay_seconds=0,
        log_dir=str(tmp_path / "logs"),
        output_dir=str(tmp_path / "out"),
        random_seed=1234,
    )


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """
    응답 순서를 지정하는 MockTransport 생성

    responses 항목은 (상태 코드, 본문) 튜플 또는 예외. 마지막 항목은 이후 호출에 반복 사용.
    호출된 요청은 transport.requests에 기록.
    """

    def factory(*responses) -> httpx.MockTransport:
        queue = list(responses)
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            item = queue.pop(0) if len(queue) > 1 else queue[0]
            if isinstance(item, Exception):
                raise item
            status_code, body = item
            return httpx.Response(status_code, text=body)

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return factory
