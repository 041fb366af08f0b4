"""
상품 카탈로그 내보내기 실행 진입점

사용법:
    python -m product_catalog [옵션]

옵션:
    --minPrice=<실수>       최소 가격 (포함)
    --maxPrice=<실수>       최대 가격 (포함)
    --fileFormat=<형식>     출력 형식 (json, csv, xml) [기본값: json]

예시:
    python -m product_catalog
    python -m product_catalog --minPrice=10 --maxPrice=50 --fileFormat=csv
"""
import asyncio
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import httpx

from product_catalog.config import Settings, get_settings
from product_catalog.exceptions import DeserializationError
from product_catalog.models.arguments import ResolvedArguments
from product_catalog.services.audit_log import close_audit_logger, create_audit_logger
from product_catalog.services.cache import ResponseCache
from product_catalog.services.exporters import export_catalog
from product_catalog.services.fetcher import ProductApiClient
from product_catalog.services.transform import (
    enrich_products,
    filter_by_price_range,
    group_and_sort,
    parse_products,
)
from product_catalog.utils.arg_parser import resolve_arguments

logger = logging.getLogger(__name__)


async def run(
    arguments: ResolvedArguments,
    client: ProductApiClient,
    rng: random.Random,
    settings: Settings,
) -> Path:
    """
    조회 -> 역직렬화 -> 필터 -> 보강 -> 그룹/정렬 -> 저장

    Returns:
        저장된 파일 경로
    """
    payload = await client.fetch(settings.api_url)
    products = parse_products(payload)

    products = filter_by_price_range(products, arguments.min_price, arguments.max_price)
    enriched = enrich_products(products, rng)
    grouped = group_and_sort(enriched)
    logger.info(f"[Main] {len(enriched)}개 상품, {len(grouped)}개 카테고리")

    return export_catalog(
        grouped,
        arguments.output_format,
        Path(settings.output_dir),
        settings.output_basename,
    )


def main(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """
    CLI 실행

    Returns:
        종료 코드 (성공 0, 에러 1)
    """
    # 설정 오류(잘못된 LOG_LEVEL 등)도 실행 에러와 같은 방식으로 보고
    try:
        settings = settings or get_settings()
        logging.basicConfig(level=settings.log_level)
    except Exception as e:
        print(f"An error occurred: {e}")
        return 1

    args = list(sys.argv[1:] if argv is None else argv)
    arguments = resolve_arguments(args, default_format=settings.default_format)

    # 실행 단위로 공유되는 캐시와 난수 생성기
    cache = ResponseCache()
    rng = random.Random(settings.random_seed)
    audit_logger = create_audit_logger(settings.log_dir, datetime.now())
    client = ProductApiClient(cache, audit_logger, settings=settings, transport=transport)

    try:
        asyncio.run(run(arguments, client, rng, settings))
    except DeserializationError as e:
        print(str(e))
        return 1
    except Exception as e:
        logger.debug("[Main] 실행 실패", exc_info=True)
        print(f"An error occurred: {e}")
        return 1
    finally:
        close_audit_logger(audit_logger)

    return 0


if __name__ == "__main__":
    sys.exit(main())
