"""토크나이저 추상 클래스"""
from abc import ABC, abstractmethod
from typing import List


class TokenizerError(RuntimeError):
    """토크나이저 초기화 또는 분절 실패"""


class Tokenizer(ABC):
    """
    토크나이저 추상 클래스

    유사도 엔진은 segment() 하나에만 의존하므로, 같은 시그니처를 가진
    어떤 분절기든 대체할 수 있다.
    """

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        """
        텍스트 분절

        Args:
            text: 정규화된 텍스트

        Returns:
            토큰 리스트 (원문 순서 유지)

        Raises:
            TokenizerError: 분절 리소스를 사용할 수 없을 때
        """
        pass
