"""基于 TF-IDF 的中文关键词抽取。"""

from .config import ExtractorConfig
from .core.extractor import TagExtractor
from .core.segmentation import JiebaPosSegmenter, SimpleSegmenter, WordTag, create_segmenter
from .dictionary import Idf, StopWord
from .errors import ConfigurationError, DictionaryLoadError, NotInitializedError, TaggerError
from .models.weighted_term import WeightedTerm, WeightedTermList, compare

__all__ = [
    "ConfigurationError",
    "DictionaryLoadError",
    "ExtractorConfig",
    "Idf",
    "JiebaPosSegmenter",
    "NotInitializedError",
    "SimpleSegmenter",
    "StopWord",
    "TagExtractor",
    "TaggerError",
    "WeightedTerm",
    "WeightedTermList",
    "WordTag",
    "compare",
    "create_segmenter",
]
