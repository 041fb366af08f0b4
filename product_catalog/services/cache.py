"""
인메모리 응답 캐시
URL -> 응답 본문 텍스트 (프로세스 수명 동안 유지, 만료/영속화 없음)
"""
from typing import Dict, Optional


class ResponseCache:
    """인메모리 응답 캐시"""

    def __init__(self) -> None:
        self._cache: Dict[str, str] = {}

    def get(self, url: str) -> Optional[str]:
        """캐시 조회"""
        return self._cache.get(url)

    def set(self, url: str, body: str) -> None:
        """캐시 저장"""
        self._cache[url] = body
