"""
상품 모델 정의
상품 API 응답 및 보강(enrich)된 상품 관련 모델
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Rating(BaseModel):
    """상품 평점"""

    model_config = ConfigDict(frozen=True)

    rate: float = Field(0.0, description="평균 평점")
    count: int = Field(0, description="평가 수")


class Product(BaseModel):
    """상품 API 원본 모델"""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Fjallraven - Foldsack No. 1 Backpack, Fits 15 Laptops",
                "price": 109.95,
                "description": "Your perfect pack for everyday use and walks in the forest.",
                "category": "men's clothing",
                "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
                "rating": {"rate": 3.9, "count": 120},
            }
        },
    )

    id: int = Field(..., description="상품 고유 ID")
    title: Optional[str] = Field(None, description="상품명")
    price: float = Field(..., description="가격")
    description: Optional[str] = Field(None, description="상품 설명")
    category: str = Field("", description="카테고리")
    image: Optional[str] = Field(None, description="이미지 URL")
    rating: Optional[Rating] = Field(None, description="평점 정보")


class EnrichedProduct(BaseModel):
    """보강된 상품 모델 (할인가, 재고, 인기도 추가)"""

    id: int = Field(..., description="상품 고유 ID")
    title: Optional[str] = Field(None, description="상품명")
    original_price: float = Field(..., description="원래 가격")
    description: Optional[str] = Field(None, description="상품 설명")
    category: str = Field("", description="카테고리")
    discounted_price: float = Field(..., description="할인가 (5~20% 할인)")
    stock_availability: int = Field(..., ge=0, le=100, description="재고 수준 (0~100)")
    popularity_score: float = Field(..., description="인기도 점수")


# 카테고리 -> 가격 내림차순 상품 목록 (카테고리 순서는 처음 등장한 순서)
GroupedCatalog = Dict[str, List[EnrichedProduct]]
