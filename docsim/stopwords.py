"""불용어 집합 모듈"""
import os
import logging
from typing import FrozenSet, Iterable, Iterator, TextIO, Union

logger = logging.getLogger(__name__)

StopwordSource = Union[str, "os.PathLike[str]", TextIO]


class StopwordSet:
    """
    불변 불용어 집합

    한 번 로딩된 뒤에는 읽기 전용이며, 여러 비교 호출이 공유한다.
    소속 검사는 대소문자를 구분하는 완전 일치다.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(w for w in words if w)

    @classmethod
    def load(cls, source: StopwordSource, encoding: str = "utf-8") -> "StopwordSet":
        """
        공백 구분 단어 목록에서 불용어 집합 로딩

        Args:
            source: 파일 경로 또는 열린 텍스트 스트림
            encoding: 경로로 열 때 사용할 인코딩

        Returns:
            StopwordSet (빈 소스면 빈 집합)

        Raises:
            OSError: 파일을 열 수 없을 때
        """
        if isinstance(source, (str, os.PathLike)):
            with open(source, "r", encoding=encoding) as f:
                stopwords = cls(_iter_words(f))
            logger.info(f"불용어 로딩 완료: {len(stopwords)}개 ({source})")
        else:
            stopwords = cls(_iter_words(source))
            logger.info(f"불용어 로딩 완료: {len(stopwords)}개 (stream)")
        return stopwords

    def contains(self, token: str) -> bool:
        return token in self._words

    def __contains__(self, token: object) -> bool:
        return token in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"StopwordSet({len(self._words)} words)"


def _iter_words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()
