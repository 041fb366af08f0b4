"""
상품 카탈로그 내보내기
상품 API 조회 -> 가격 필터 -> 보강 -> 카테고리별 그룹/정렬 -> JSON/CSV/XML 저장
"""

__version__ = "1.0.0"
