from docsim.data.sample_documents import SAMPLE_DOCUMENTS

__all__ = ['SAMPLE_DOCUMENTS']
