"""문서 토큰 추출 모듈"""
import logging
from typing import List

from docsim.stopwords import StopwordSet
from docsim.tokenizer.base import Tokenizer
from docsim.utils.text import normalize_text

logger = logging.getLogger(__name__)


def extract_grams(text: str, tokenizer: Tokenizer, stopwords: StopwordSet) -> List[str]:
    """
    문서에서 유의미한 토큰 리스트 추출

    정규화 → 분절 → 불용어 제거 순서로 처리하며, 남은 토큰의 상대 순서는 유지한다.
    토크나이저 예외는 그대로 전파한다.

    Args:
        text: 원문 문서
        tokenizer: segment()를 제공하는 분절기
        stopwords: 불용어 집합

    Returns:
        불용어와 빈 토큰이 제거된 토큰 리스트
    """
    normalized = normalize_text(text)
    if not normalized:
        return []

    tokens = tokenizer.segment(normalized)
    grams = [t for t in tokens if t and t not in stopwords]

    logger.debug(f"토큰 추출: {len(tokens)}개 → 불용어 제거 후 {len(grams)}개")
    return grams
