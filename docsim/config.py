"""설정 관리 모듈"""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# .env 파일 로드
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

# 사전/리소스 디렉토리 (기본값: 패키지에 포함된 docsim/data)
DICT_DIR = Path(os.getenv("DICT_DIR", str(Path(__file__).parent / "data")))

# jieba 사전 경로 (비어있으면 jieba 내장 사전 사용)
JIEBA_DICT_PATH = os.getenv("JIEBA_DICT_PATH", "").strip()
USER_DICT_PATH = os.getenv("USER_DICT_PATH", "").strip()
IDF_PATH = os.getenv("IDF_PATH", "").strip()

# 불용어 파일 경로 (단일 설정값, 로딩 시 이 경로만 사용)
STOPWORDS_PATH = Path(os.getenv("STOPWORDS_PATH", str(DICT_DIR / "stopwords.txt")))

# 토크나이저 선택
# "jieba": 사전 + HMM 기반 중국어 분절 (운영 기본값)
# "char": 코드포인트 단위 분절 (사전 없이 동작하는 fallback)
SUPPORTED_TOKENIZERS = ["jieba", "char"]
_tokenizer_raw = os.getenv("TOKENIZER", "jieba").strip().lower()
if _tokenizer_raw not in SUPPORTED_TOKENIZERS:
    logging.warning(f"잘못된 TOKENIZER 값: {_tokenizer_raw}, 'jieba'로 fallback")
    TOKENIZER = "jieba"
else:
    TOKENIZER = _tokenizer_raw

# HMM으로 미등록어 분절 여부 (기본: True)
TOKENIZER_HMM = os.getenv("TOKENIZER_HMM", "true").lower() == "true"

# 로깅 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_log_format_raw = os.getenv("LOG_FORMAT", "text").lower()
if _log_format_raw not in ["text", "json"]:
    logging.warning(f"잘못된 LOG_FORMAT 값: {_log_format_raw}, 'text'로 fallback")
    LOG_FORMAT = "text"
else:
    LOG_FORMAT = _log_format_raw


def validate_config(tokenizer: str = None, stopwords_path=None):
    """
    설정 검증

    Args:
        tokenizer: 검증할 토크나이저 이름 (None이면 TOKENIZER)
        stopwords_path: 검증할 불용어 파일 경로 (None이면 STOPWORDS_PATH)

    Raises:
        ValueError: 하나 이상의 설정 오류가 있을 때
    """
    errors = []
    tokenizer = tokenizer or TOKENIZER
    stopwords_path = Path(stopwords_path) if stopwords_path else STOPWORDS_PATH

    if tokenizer not in SUPPORTED_TOKENIZERS:
        errors.append(f"지원하지 않는 TOKENIZER입니다: {tokenizer} (가능: {', '.join(SUPPORTED_TOKENIZERS)})")

    if not stopwords_path.is_file():
        errors.append(f"불용어 파일을 찾을 수 없습니다: {stopwords_path}")

    # 사전 경로는 명시적으로 지정된 경우에만 검증
    if tokenizer == "jieba":
        for name, value in (("JIEBA_DICT_PATH", JIEBA_DICT_PATH),
                            ("USER_DICT_PATH", USER_DICT_PATH),
                            ("IDF_PATH", IDF_PATH)):
            if value and not Path(value).is_file():
                errors.append(f"{name} 파일을 찾을 수 없습니다: {value}")

    if errors:
        raise ValueError("설정 오류:\n" + "\n".join(f"  - {e}" for e in errors))

    return True
