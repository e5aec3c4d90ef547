"""코드포인트 단위 토크나이저 (사전 없이 동작하는 fallback)"""
from typing import List

from docsim.tokenizer.base import Tokenizer


class CharTokenizer(Tokenizer):
    """공백을 제외한 각 코드포인트를 하나의 토큰으로 분절"""

    def segment(self, text: str) -> List[str]:
        return [ch for ch in text if not ch.isspace()]
