"""停用词与 IDF 词典。"""

from .idf import Idf
from .stopwords import StopWord

__all__ = [
    "Idf",
    "StopWord",
]
