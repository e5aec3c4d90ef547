"""Jaccard 유사도 엔진"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from docsim import config
from docsim.grams import extract_grams
from docsim.stopwords import StopwordSet
from docsim.tokenizer import Tokenizer, get_tokenizer
from docsim.utils.text import jaccard_coefficient

logger = logging.getLogger(__name__)


class SimilarityEngine:
    """
    문서 쌍의 Jaccard 유사도 계산기

    토크나이저와 불용어 집합은 생성 시 한 번만 준비하고 엔진 수명 동안 읽기 전용으로 보유한다.
    비교 호출은 공유 상태를 변경하지 않으므로 생성 이후에는 여러 스레드에서 동시에 호출해도 된다.
    """

    def __init__(self, tokenizer: Tokenizer, stopwords: Optional[StopwordSet] = None):
        self.tokenizer = tokenizer
        self.stopwords = stopwords if stopwords is not None else StopwordSet()

    @classmethod
    def from_config(cls, tokenizer_name: Optional[str] = None,
                    stopwords_path: Optional[Path] = None,
                    hmm: Optional[bool] = None) -> "SimilarityEngine":
        """
        설정값으로 엔진 생성 (단일 스레드 초기화 단계)

        Args:
            tokenizer_name: 토크나이저 이름 (None이면 config.TOKENIZER)
            stopwords_path: 불용어 파일 경로 (None이면 config.STOPWORDS_PATH)
            hmm: HMM 사용 여부 (None이면 config.TOKENIZER_HMM)

        Raises:
            OSError: 불용어/사전 파일을 읽을 수 없을 때
            TokenizerError: 토크나이저 초기화 실패 시
        """
        tokenizer_name = tokenizer_name or config.TOKENIZER
        stopwords_path = stopwords_path or config.STOPWORDS_PATH
        if hmm is None:
            hmm = config.TOKENIZER_HMM

        stopwords = StopwordSet.load(stopwords_path)

        if tokenizer_name == "jieba":
            tokenizer = get_tokenizer(
                "jieba",
                dict_path=config.JIEBA_DICT_PATH or None,
                user_dict_path=config.USER_DICT_PATH or None,
                idf_path=config.IDF_PATH or None,
                hmm=hmm,
            )
        else:
            tokenizer = get_tokenizer(tokenizer_name)

        return cls(tokenizer, stopwords)

    def extract(self, text: str) -> List[str]:
        return extract_grams(text, self.tokenizer, self.stopwords)

    def calc_coeff(self, doc_a: str, doc_b: str) -> float:
        """
        두 문서의 Jaccard 계수 계산

        원문이 둘 다 비어 있으면 1.0, 한쪽만 비어 있으면 0.0.
        추출 후 합집합이 비면(문장부호/불용어뿐인 문서) 0.0.

        Returns:
            0.0 ~ 1.0 사이 유사도
        """
        if not doc_a and not doc_b:
            return 1.0
        if not doc_a or not doc_b:
            return 0.0

        grams_a = self.extract(doc_a)
        grams_b = self.extract(doc_b)

        coeff = jaccard_coefficient(grams_a, grams_b)
        logger.debug(f"유사도 계산: {len(grams_a)}개 vs {len(grams_b)}개 토큰 → {coeff:.4f}")
        return coeff

    def similarity_matrix(self, documents: Sequence[str]) -> List[List[float]]:
        """
        문서 목록의 쌍별 유사도 행렬 (상삼각)

        i번째 행은 j >= i인 모든 문서와의 계수를 담는다 (대각선 포함).
        """
        rows = []
        for i, doc_a in enumerate(documents):
            rows.append([self.calc_coeff(doc_a, documents[j]) for j in range(i, len(documents))])
        return rows
