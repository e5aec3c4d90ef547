"""토크나이저 모듈"""
from docsim.tokenizer.base import Tokenizer, TokenizerError
from docsim.tokenizer.char_tokenizer import CharTokenizer


def get_tokenizer(tokenizer_name: str = "jieba", **kwargs) -> Tokenizer:
    """
    토크나이저 팩토리

    Args:
        tokenizer_name: 토크나이저 이름 ("jieba" | "char")
        **kwargs: JiebaTokenizer 생성 인자 (dict_path, user_dict_path, idf_path, hmm)
    """
    if tokenizer_name == "char":
        return CharTokenizer()

    if tokenizer_name == "jieba":
        # jieba는 필요할 때만 임포트
        from docsim.tokenizer.jieba_tokenizer import JiebaTokenizer
        return JiebaTokenizer(**kwargs)

    raise ValueError(f"지원하지 않는 토크나이저: {tokenizer_name}")


__all__ = [
    'Tokenizer',
    'TokenizerError',
    'CharTokenizer',
    'get_tokenizer',
]
