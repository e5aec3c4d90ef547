#!/usr/bin/env python3
"""문서 쌍별 Jaccard 유사도 행렬 출력 스크립트"""
import sys
import logging
import argparse
import traceback
from pathlib import Path

# 프로젝트 루트를 경로에 추가 (어디서 실행해도 동작하도록)
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from docsim.config import validate_config, SUPPORTED_TOKENIZERS
from docsim.data import SAMPLE_DOCUMENTS
from docsim.engine import SimilarityEngine
from docsim.report import format_matrix
from docsim.utils.logging import setup_logging, track_performance, log_with_extra

logger = logging.getLogger("run_matrix")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="문서 쌍별 Jaccard 유사도 행렬 계산")
    parser.add_argument("--file", type=Path, default=None,
                        help="한 줄에 문서 하나씩 담긴 텍스트 파일 (없으면 샘플 문서 사용)")
    parser.add_argument("--stopwords", type=Path, default=None,
                        help="불용어 파일 경로 (기본: STOPWORDS_PATH)")
    parser.add_argument("--tokenizer", choices=SUPPORTED_TOKENIZERS, default=None,
                        help="토크나이저 (기본: TOKENIZER)")
    parser.add_argument("--no-hmm", action="store_true",
                        help="jieba HMM 미등록어 분절 비활성화")
    return parser.parse_args(argv)


def load_documents(path: Path):
    """파일에서 문서 목록 로딩 (빈 줄 제외)"""
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def main(argv=None):
    """메인 실행 함수"""
    args = parse_args(argv)
    setup_logging()

    try:
        # 1. 설정 검증
        validate_config(tokenizer=args.tokenizer, stopwords_path=args.stopwords)

        # 2. 엔진 초기화 (비교 전에 완료되어야 함)
        with track_performance("engine_init"):
            engine = SimilarityEngine.from_config(
                tokenizer_name=args.tokenizer,
                stopwords_path=args.stopwords,
                hmm=False if args.no_hmm else None,
            )

        # 3. 문서 로딩
        documents = load_documents(args.file) if args.file else SAMPLE_DOCUMENTS

        # 4. 유사도 행렬 계산 및 출력
        with track_performance("similarity_matrix", {"documents": len(documents)}):
            rows = engine.similarity_matrix(documents)

        log_with_extra(logger, logging.INFO, "유사도 행렬 계산 완료", {
            "documents": len(documents),
            "tokenizer": type(engine.tokenizer).__name__,
            "stopwords": len(engine.stopwords),
        })
        print(format_matrix(rows))

    except Exception as e:
        error_msg = f"유사도 행렬 계산 중 오류 발생: {e}\n{traceback.format_exc()}"
        print(error_msg, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
