"""텍스트 처리 유틸리티"""
import re
from typing import Iterable

# 중국어/전각 문장부호 (괄호, 따옴표, 가운뎃점, 말줄임표 포함)
CJK_PUNCTUATION = (
    "＂＃＄％＆＇（）＊＋，－／：；＜＝＞＠［＼］＾＿｀｛｜｝～｟｠｢｣､　、〃〈〉《》"
    "「」『』【】〔〕〖〗〘〙〚〛〜〝〞〟〰〾〿–—‘’‛“”„‟…‧﹏﹑﹔·！？｡。"
)

# ASCII 문장부호 및 공백 문자
ASCII_PUNCTUATION = "!#$%^&*()_+-= \t\n|\\';\":/.,?><~"

PUNCTUATION = CJK_PUNCTUATION + ASCII_PUNCTUATION

_PUNCTUATION_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")


def normalize_text(text: str) -> str:
    """
    문장부호/기호 제거 (유사도 계산용)

    대소문자 변환이나 공백 정규화는 하지 않고, 금지 목록에 있는 코드포인트만
    원래 순서를 유지한 채 제거한다.

    Args:
        text: 원문 텍스트

    Returns:
        문장부호가 제거된 텍스트 (빈 문자열일 수 있음)
    """
    if not text:
        return ""
    return _PUNCTUATION_RE.sub("", text)


def jaccard_coefficient(tokens1: Iterable[str], tokens2: Iterable[str]) -> float:
    """Jaccard 계수 계산 (토큰 집합 기반, 중복 무시)"""
    set1 = set(tokens1)
    set2 = set(tokens2)

    union = len(set1 | set2)
    if union == 0:
        # 두 문서 모두 유의미한 토큰이 없으면 유사도 0
        return 0.0

    intersection = len(set1 & set2)
    return intersection / union
