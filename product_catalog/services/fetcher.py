"""
상품 API 클라이언트
응답 캐시 + 고정 간격 재시도 + 감사 로그
"""
import logging
from typing import Optional

import httpx
from tenacity import AsyncRetrying, RetryError, retry_if_exception_type, stop_after_attempt, wait_fixed

from product_catalog.config import Settings, get_settings
from product_catalog.exceptions import FetchError
from product_catalog.services.cache import ResponseCache

# 시도 실패로 보고 재시도하는 에러 (전송 에러, 2xx 아닌 상태, 잘못된 URL, 스트림 에러)
RETRYABLE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError)


class ProductApiClient:
    """상품 API 클라이언트"""

    def __init__(
        self,
        cache: ResponseCache,
        audit_logger: logging.Logger,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._cache = cache
        self._log = audit_logger
        self._transport = transport

    async def fetch(self, url: Optional[str] = None) -> str:
        """
        URL의 응답 본문 조회

        캐시에 있으면 네트워크 호출 없이 바로 반환합니다.
        없으면 max_retries번까지 시도하고, 실패 사이마다 retry_delay_seconds만큼 대기합니다.

        Args:
            url: 요청 URL (기본값: settings.api_url)

        Returns:
            응답 본문 텍스트

        Raises:
            FetchError: 모든 시도가 실패한 경우
        """
        url = url or self._settings.api_url

        cached = self._cache.get(url)
        if cached is not None:
            self._log.info(f"Returning cached response for URL: {url}")
            return cached

        max_attempts = max(1, self._settings.max_retries)
        retrying = AsyncRetrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_fixed(self._settings.retry_delay_seconds),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.http_timeout_seconds,
                transport=self._transport,
            ) as client:
                async for attempt in retrying:
                    with attempt:
                        body = await self._get(
                            client, url, attempt.retry_state.attempt_number
                        )
        except RetryError as e:
            cause = e.last_attempt.exception()
            self._log.error(
                f"Max retry attempts reached for URL: {url}. Failing the request."
            )
            raise FetchError(url, max_attempts, cause) from cause

        self._cache.set(url, body)
        self._log.info(f"Response cached for URL: {url}")
        return body

    async def _get(self, client: httpx.AsyncClient, url: str, attempt: int) -> str:
        """단일 GET 시도 (2xx가 아니면 httpx.HTTPStatusError)"""
        try:
            self._log.info(f"Sending GET request to URL: {url}")
            response = await client.get(url)
            self._log.info(f"Response received. Status Code: {response.status_code}")
            response.raise_for_status()
            return response.text
        except RETRYABLE_ERRORS as e:
            self._log.warning(f"Attempt {attempt} failed for URL: {url}. Error: {e}")
            raise
