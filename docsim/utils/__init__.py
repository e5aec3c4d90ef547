from docsim.utils.text import normalize_text, jaccard_coefficient, PUNCTUATION

__all__ = [
    'normalize_text',
    'jaccard_coefficient',
    'PUNCTUATION',
]
