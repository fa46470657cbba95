"""带词性标注的分词后端。

抽取器只依赖 ``Segmenter`` 协议：``cut`` 惰性地按从左到右的顺序产出 (词, 词性)，
``load_dictionary`` 从文件加载词典。默认后端是 jieba 的 posseg，另有一个不依赖
第三方库的 simple 后端，便于测试和退化场景。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Protocol

import jieba
from jieba.posseg import POSTokenizer

from ..errors import ConfigurationError, DictionaryLoadError
from .text_utils import is_cjk

logger = logging.getLogger(__name__)

UNKNOWN_FLAG = "x"


@dataclass(frozen=True)
class WordTag:
    """分词结果中的一个 (词, 词性) 对。"""

    word: str
    flag: str


class Segmenter(Protocol):
    def cut(self, sentence: str, pos_tagging: bool = True) -> Iterator[WordTag]:
        ...

    def load_dictionary(self, path: str | Path) -> None:
        ...


def _parse_word_tags(lines: Iterable[str]) -> Dict[str, str]:
    """读取词典行：第一列是词，可选的第三列是词性，缺省记为 x。"""

    tags: Dict[str, str] = {}
    for line in lines:
        parts = line.lstrip("\ufeff").split()
        if not parts:
            continue
        tags[parts[0]] = parts[2] if len(parts) >= 3 else UNKNOWN_FLAG
    return tags


class _OptionalTagPOSTokenizer(POSTokenizer):
    """词性列可以缺省的 POSTokenizer。"""

    def load_word_tag(self, f) -> None:
        with f:
            self.word_tag_tab = _parse_word_tags(line.decode("utf-8") for line in f)


class JiebaPosSegmenter:
    """jieba 词性标注分词。

    每次 ``load_dictionary`` 都新建 Tokenizer，并立即初始化，
    这样词典错误在加载时暴露，而不是拖到第一次抽取。
    """

    def __init__(self, hmm: bool = True) -> None:
        self.hmm = hmm
        self._tokenizer = None
        self._pos_tokenizer = None

    def load_dictionary(self, path: str | Path) -> None:
        file_path = Path(path)
        tokenizer = jieba.Tokenizer(dictionary=str(file_path))
        try:
            tokenizer.initialize()
            pos_tokenizer = _OptionalTagPOSTokenizer(tokenizer)
        except OSError as exc:
            raise DictionaryLoadError(file_path, str(exc)) from exc
        except ValueError as exc:
            # jieba 对非法词条抛 ValueError（UnicodeDecodeError 也是其子类）
            raise DictionaryLoadError(file_path, str(exc)) from exc
        if not tokenizer.total:
            raise DictionaryLoadError(file_path, "分词词典为空")
        self._tokenizer = tokenizer
        self._pos_tokenizer = pos_tokenizer
        logger.info("分词词典已加载：%s（%d 个词）", file_path, len(pos_tokenizer.word_tag_tab))

    def cut(self, sentence: str, pos_tagging: bool = True) -> Iterator[WordTag]:
        if self._pos_tokenizer is None:
            raise ConfigurationError("jieba 分词器尚未加载词典")
        if not sentence:
            return
        if pos_tagging:
            for pair in self._pos_tokenizer.cut(sentence, HMM=self.hmm):
                yield WordTag(word=pair.word, flag=pair.flag)
        else:
            for word in self._tokenizer.cut(sentence, HMM=self.hmm):
                yield WordTag(word=word, flag="")


class SimpleSegmenter:
    """内置退化方案：词典正向最大匹配 + 两字切块。

    - 词典只读取每行第一列（词）与可选的第三列（词性），词频忽略；
    - 连续汉字优先匹配词典中的最长词，未匹配部分按两字一块切分，标为 ``x``；
    - 连续的 ASCII 字母数字整体作为一个词，标为 ``eng``。
    """

    unknown_flag = UNKNOWN_FLAG
    alnum_flag = "eng"

    def __init__(self) -> None:
        self._tags: Dict[str, str] = {}
        self._max_length = 0

    def load_dictionary(self, path: str | Path) -> None:
        file_path = Path(path)
        try:
            with file_path.open("r", encoding="utf-8") as handle:
                tags = _parse_word_tags(handle)
        except OSError as exc:
            raise DictionaryLoadError(file_path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise DictionaryLoadError(file_path, f"不是 UTF-8 文本：{exc}") from exc
        self._tags = tags
        self._max_length = max((len(word) for word in tags), default=0)
        logger.info("简易分词词典已加载：%s（%d 个词）", file_path, len(tags))

    def cut(self, sentence: str, pos_tagging: bool = True) -> Iterator[WordTag]:
        chinese_buffer = ""
        alnum_buffer = ""
        for char in sentence:
            if is_cjk(char):
                if alnum_buffer:
                    yield self._tag(alnum_buffer, self.alnum_flag, pos_tagging)
                    alnum_buffer = ""
                chinese_buffer += char
                continue
            if chinese_buffer:
                yield from self._cut_chinese(chinese_buffer, pos_tagging)
                chinese_buffer = ""
            if char.isascii() and char.isalnum():
                alnum_buffer += char
                continue
            if alnum_buffer:
                yield self._tag(alnum_buffer, self.alnum_flag, pos_tagging)
                alnum_buffer = ""
            yield self._tag(char, self.unknown_flag, pos_tagging)
        if chinese_buffer:
            yield from self._cut_chinese(chinese_buffer, pos_tagging)
        if alnum_buffer:
            yield self._tag(alnum_buffer, self.alnum_flag, pos_tagging)

    def _cut_chinese(self, text: str, pos_tagging: bool) -> Iterator[WordTag]:
        unmatched = ""
        index = 0
        while index < len(text):
            word = self._longest_match(text, index)
            if word is None:
                unmatched += text[index]
                index += 1
                continue
            for chunk in _split_chinese_chunks(unmatched):
                yield self._tag(chunk, self.unknown_flag, pos_tagging)
            unmatched = ""
            yield self._tag(word, self._tags[word], pos_tagging)
            index += len(word)
        for chunk in _split_chinese_chunks(unmatched):
            yield self._tag(chunk, self.unknown_flag, pos_tagging)

    def _longest_match(self, text: str, start: int) -> str | None:
        longest = min(self._max_length, len(text) - start)
        for length in range(longest, 1, -1):
            candidate = text[start : start + length]
            if candidate in self._tags:
                return candidate
        return None

    @staticmethod
    def _tag(word: str, flag: str, pos_tagging: bool) -> WordTag:
        return WordTag(word=word, flag=flag if pos_tagging else "")


def _split_chinese_chunks(text: str) -> List[str]:
    if len(text) <= 1:
        return [text] if text else []
    chunks = [text[index : index + 2] for index in range(0, len(text), 2)]
    if len(chunks) >= 2 and len(chunks[-1]) == 1:
        chunks[-2] += chunks[-1]
        chunks.pop()
    return chunks


def create_segmenter(backend: str = "jieba", hmm: bool = True) -> Segmenter:
    if backend == "jieba":
        return JiebaPosSegmenter(hmm=hmm)
    if backend == "simple":
        return SimpleSegmenter()
    raise ConfigurationError(f"未知的分词后端：{backend}")
