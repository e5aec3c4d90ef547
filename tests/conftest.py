"""테스트 공통 fixture 및 유틸리티"""
import sys
from pathlib import Path
from typing import Iterable, List
import pytest

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from docsim.engine import SimilarityEngine
from docsim.stopwords import StopwordSet
from docsim.tokenizer.base import Tokenizer


class FakeTokenizer(Tokenizer):
    """
    결정적 최장 일치 분절기 (jieba 대체용)

    어휘에 있는 가장 긴 단어를 앞에서부터 매칭하고, 없으면 한 글자씩 분절한다.
    """

    def __init__(self, vocabulary: Iterable[str] = ()):
        self.vocabulary = set(vocabulary)
        self.max_len = max((len(w) for w in self.vocabulary), default=1)
        self.calls: List[str] = []

    def segment(self, text: str) -> List[str]:
        self.calls.append(text)
        tokens = []
        i = 0
        while i < len(text):
            for size in range(min(self.max_len, len(text) - i), 0, -1):
                piece = text[i:i + size]
                if size == 1 or piece in self.vocabulary:
                    tokens.append(piece)
                    i += size
                    break
        return tokens


class FailingTokenizer(Tokenizer):
    """항상 실패하는 분절기"""

    def __init__(self, error: Exception):
        self.error = error

    def segment(self, text: str) -> List[str]:
        raise self.error


VOCABULARY = ["学习", "天天", "红果子", "爬树", "可是", "他们", "就在这时"]


@pytest.fixture
def fake_tokenizer() -> FakeTokenizer:
    """샘플 어휘를 가진 가짜 분절기"""
    return FakeTokenizer(VOCABULARY)


@pytest.fixture
def stopwords() -> StopwordSet:
    """테스트용 불용어 집합"""
    return StopwordSet(["好", "的", "了", "和"])


@pytest.fixture
def engine(fake_tokenizer, stopwords) -> SimilarityEngine:
    """가짜 분절기 기반 엔진"""
    return SimilarityEngine(fake_tokenizer, stopwords)


@pytest.fixture
def stopwords_file(tmp_path) -> Path:
    """임시 불용어 파일"""
    path = tmp_path / "stopwords.txt"
    path.write_text("好 的\n了 和\n\n的\n", encoding="utf-8")
    return path
