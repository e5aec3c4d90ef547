"""Jaccard 계수 기반 문서 유사도 계산 패키지"""
from docsim.engine import SimilarityEngine
from docsim.grams import extract_grams
from docsim.stopwords import StopwordSet
from docsim.tokenizer import Tokenizer, TokenizerError, get_tokenizer
from docsim.utils.text import normalize_text, jaccard_coefficient

__all__ = [
    'SimilarityEngine',
    'extract_grams',
    'StopwordSet',
    'Tokenizer',
    'TokenizerError',
    'get_tokenizer',
    'normalize_text',
    'jaccard_coefficient',
]
