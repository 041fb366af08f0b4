"""
명령줄 인자 파싱 유틸리티
--minPrice=, --maxPrice=, --fileFormat= 세 가지 형태만 인식하고 나머지 인자는 무시
"""
import math
from typing import List, Optional, Sequence, Tuple

from product_catalog.models.arguments import (
    ArgumentError,
    FlagResult,
    OutputFormat,
    ResolvedArguments,
)

SUPPORTED_FORMATS: Tuple[str, ...] = ("json", "csv", "xml")

MIN_PRICE_FLAG = "--minPrice"
MAX_PRICE_FLAG = "--maxPrice"
FORMAT_FLAG = "--fileFormat"
KNOWN_FLAGS: Tuple[str, ...] = (MIN_PRICE_FLAG, MAX_PRICE_FLAG, FORMAT_FLAG)


def parse_price_flag(flag: str, raw: str) -> FlagResult[float]:
    """가격 플래그 값 파싱 (유한한 실수만 허용)"""
    try:
        value = float(raw.strip())
    except ValueError:
        value = math.nan

    if not math.isfinite(value):
        return FlagResult[float].failure(
            flag, raw, f"Invalid value for {flag}. Please provide a valid number."
        )
    return FlagResult[float].success(value)


def parse_format_flag(raw: str) -> FlagResult[str]:
    """출력 형식 플래그 값 파싱 (대소문자 무시)"""
    output_format = raw.strip().lower()
    if output_format not in SUPPORTED_FORMATS:
        return FlagResult[str].failure(
            FORMAT_FLAG,
            raw,
            "Invalid value for --fileFormat. Please use 'json', 'csv', or 'xml'.",
        )
    return FlagResult[str].success(output_format)


def split_flag(token: str) -> Optional[Tuple[str, str]]:
    """'--name=value' 형태의 인식 가능한 플래그면 (이름, 값), 아니면 None"""
    name, sep, value = token.partition("=")
    if not sep or name not in KNOWN_FLAGS:
        return None
    return name, value


def resolve_arguments(
    args: Sequence[str],
    default_format: OutputFormat = "json",
) -> ResolvedArguments:
    """
    명령줄 인자 해석

    인자를 명령줄 순서대로 처리합니다. 잘못된 값이 있어도 중단하지 않고
    나머지 인자를 계속 처리하며, 에러는 errors 목록에 모아서 반환합니다.
    잘못된 플래그의 값은 기본값(또는 앞서 지정된 값)으로 남습니다.
    '--name=value' 형태가 아닌 인자('--minPrice 10', '--maxPrice' 등)는 무시합니다.

    Args:
        args: 명령줄 인자 (프로그램 이름 제외)
        default_format: --fileFormat이 없을 때 사용할 형식

    Returns:
        ResolvedArguments
    """
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    output_format: str = default_format
    errors: List[ArgumentError] = []

    for token in args:
        flag = split_flag(token)
        if flag is None:
            continue
        name, raw = flag

        if name == FORMAT_FLAG:
            result = parse_format_flag(raw)
        else:
            result = parse_price_flag(name, raw)

        if not result.ok:
            errors.append(result.error)
            print(result.error.message)
        elif name == MIN_PRICE_FLAG:
            min_price = result.value
            print(f"Minimum price set to: {min_price}")
        elif name == MAX_PRICE_FLAG:
            max_price = result.value
            print(f"Maximum price set to: {max_price}")
        else:
            output_format = result.value
            print(f"File format set to: {output_format}")

    return ResolvedArguments(
        min_price=min_price,
        max_price=max_price,
        output_format=output_format,
        errors=errors,
    )
