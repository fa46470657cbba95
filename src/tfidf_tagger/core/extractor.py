"""基于 TF-IDF 的关键词抽取。"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable

from ..config import ExtractorConfig
from ..dictionary.idf import Idf
from ..dictionary.stopwords import StopWord
from ..errors import NotInitializedError
from ..models.weighted_term import WeightedTerm, WeightedTermList
from .segmentation import Segmenter, create_segmenter
from .text_utils import clean_word, fold_case

logger = logging.getLogger(__name__)

# 空列表表示不限制词性
DEFAULT_ALLOW_POS: tuple[str, ...] = ()


@dataclass(frozen=True)
class _Dictionaries:
    """抽取时使用的一组词典快照，整体替换，不做原地修改。"""

    segmenter: Segmenter | None = None
    idf: Idf | None = None
    stop_words: StopWord = field(default_factory=StopWord)


class TagExtractor:
    """从句子中抽取 top-K 关键词。

    流程：分词 → 词性/长度/停用词过滤 → 词频统计 → 归一化 →
    IDF 加权（未登录词用中位数）→ 权重降序、文本升序 → 截断。

    加载方法会整体替换词典快照；抽取开始时取一次快照，
    因此并发抽取不会看到加载到一半的状态。加载之间需要调用方自行串行化。
    """

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        segmenter_factory: Callable[[], Segmenter] | None = None,
    ) -> None:
        self.config = config or ExtractorConfig()
        self._segmenter_factory = segmenter_factory or (
            lambda: create_segmenter(self.config.segmenter_backend, hmm=self.config.hmm)
        )
        self._dictionaries = _Dictionaries()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ExtractorConfig | None = None) -> "TagExtractor":
        """按配置一次性加载分词词典、IDF 词典与可选的停用词表。"""

        extractor = cls(config)
        extractor.load_dictionary(extractor.config.dictionary_path)
        extractor.load_idf(extractor.config.idf_path)
        if extractor.config.stop_words_path:
            extractor.load_stop_words(extractor.config.stop_words_path)
        return extractor

    def load_dictionary(self, path: str | Path) -> None:
        """新建分词器并加载词典，同时把停用词表重置为空。"""

        segmenter = self._segmenter_factory()
        segmenter.load_dictionary(path)
        self._swap(segmenter=segmenter, stop_words=StopWord())

    def load_idf(self, path: str | Path) -> None:
        self._swap(idf=Idf.from_file(path))

    def load_stop_words(self, path: str | Path) -> None:
        self._swap(stop_words=StopWord.from_file(path))

    def extract_tags(self, sentence: str, top_k: int | None = None) -> WeightedTermList:
        return self.extract_tags_with_pos(sentence, top_k, DEFAULT_ALLOW_POS)

    def extract_tags_with_pos(
        self,
        sentence: str,
        top_k: int | None = None,
        allow_pos: Iterable[str] | None = None,
    ) -> WeightedTermList:
        """抽取关键词，``allow_pos`` 非空时只保留这些词性的词，None 或空表示不限制。"""

        dictionaries = self._dictionaries
        if dictionaries.segmenter is None or dictionaries.idf is None:
            raise NotInitializedError("请先调用 load_dictionary 与 load_idf 再抽取关键词")
        if top_k is None:
            top_k = self.config.default_top_k

        allowed = frozenset(allow_pos or DEFAULT_ALLOW_POS)
        frequencies = self._count_terms(dictionaries, sentence, allowed)
        total = sum(frequencies.values())
        if total == 0 or top_k <= 0:
            return WeightedTermList()

        idf = dictionaries.idf
        tags = WeightedTermList()
        for term, count in frequencies.items():
            weight, found = idf.frequency(term)
            if not found:
                weight = idf.median
            tags.append(WeightedTerm(text=term, weight=weight * (count / total)))
        tags.sort_descending()
        logger.debug("抽取到 %d 个候选词，返回前 %d 个", len(tags), top_k)
        return tags.top(top_k)

    def _count_terms(
        self,
        dictionaries: _Dictionaries,
        sentence: str,
        allow_pos: frozenset[str],
    ) -> Counter[str]:
        frequencies: Counter[str] = Counter()
        if not sentence:
            return frequencies
        for pair in dictionaries.segmenter.cut(sentence, pos_tagging=True):
            if allow_pos and pair.flag not in allow_pos:
                continue
            word = clean_word(pair.word)
            if len(word) < self.config.min_word_length:
                continue
            # 停用词按小写查询，但计数键保留原始大小写
            if dictionaries.stop_words.is_stop_word(fold_case(word)):
                continue
            frequencies[word] += 1
        return frequencies

    def _swap(self, **changes) -> None:
        with self._lock:
            self._dictionaries = replace(self._dictionaries, **changes)
