"""jieba 기반 토크나이저"""
import logging
from pathlib import Path
from typing import List, Optional

import jieba

from docsim.tokenizer.base import Tokenizer, TokenizerError

logger = logging.getLogger(__name__)


def _require_file(name: str, path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    if not Path(path).is_file():
        raise FileNotFoundError(f"{name} 파일을 찾을 수 없습니다: {path}")
    return str(path)


class JiebaTokenizer(Tokenizer):
    """
    jieba 사전 + HMM 분절기

    jieba는 HMM 모델을 패키지에 내장하고 있어 별도 모델 경로가 없고,
    hmm 플래그로 미등록어 분절 사용 여부만 정한다.
    사전은 생성 시점에 즉시 로딩하므로 이후 segment() 호출은 읽기 전용이다.
    """

    def __init__(self, dict_path: Optional[str] = None,
                 user_dict_path: Optional[str] = None,
                 idf_path: Optional[str] = None,
                 hmm: bool = True):
        self.dict_path = _require_file("사전", dict_path)
        self.user_dict_path = _require_file("사용자 사전", user_dict_path)
        # IDF 테이블은 분절에 쓰이지 않으며 읽을 수 있는지만 확인
        self.idf_path = _require_file("IDF", idf_path)
        self.hmm = hmm

        try:
            if self.dict_path:
                self._tokenizer = jieba.Tokenizer(dictionary=self.dict_path)
            else:
                self._tokenizer = jieba.Tokenizer()
            self._tokenizer.initialize()
            if self.user_dict_path:
                self._tokenizer.load_userdict(self.user_dict_path)
        except Exception as e:
            raise TokenizerError(f"jieba 초기화 실패: {type(e).__name__}: {e}") from e

        logger.info(
            f"jieba 토크나이저 초기화 완료 "
            f"(dict={self.dict_path or 'default'}, user_dict={self.user_dict_path}, hmm={self.hmm})"
        )

    def segment(self, text: str) -> List[str]:
        if not text:
            return []
        try:
            return list(self._tokenizer.cut(text, HMM=self.hmm))
        except Exception as e:
            raise TokenizerError(f"jieba 분절 실패: {type(e).__name__}: {e}") from e
