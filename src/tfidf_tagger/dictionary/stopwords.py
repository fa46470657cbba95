"""停用词表。"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import FrozenSet, Iterable

from ..core.text_utils import fold_case
from ..errors import DictionaryLoadError

logger = logging.getLogger(__name__)


class StopWord:
    """加载后只读的停用词集合。

    条目统一存为小写；查询方负责把待查词小写化。
    未加载任何文件的实例对所有词都返回“不是停用词”。
    """

    def __init__(self) -> None:
        self._words: FrozenSet[str] = frozenset()

    def __len__(self) -> int:
        return len(self._words)

    def is_stop_word(self, word: str) -> bool:
        return word in self._words

    def load_dictionary(self, path: str | Path) -> None:
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DictionaryLoadError(file_path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise DictionaryLoadError(file_path, f"不是 UTF-8 文本：{exc}") from exc
        words = frozenset(fold_case(line.strip()) for line in text.splitlines() if line.strip())
        if not words:
            warnings.warn(f"停用词表 {file_path} 中没有任何词。", RuntimeWarning)
        self._words = words
        logger.info("停用词表已加载：%s（%d 个词）", file_path, len(words))

    @classmethod
    def from_file(cls, path: str | Path) -> "StopWord":
        stop_word = cls()
        stop_word.load_dictionary(path)
        return stop_word

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "StopWord":
        stop_word = cls()
        stop_word._words = frozenset(fold_case(word.strip()) for word in words if word.strip())
        return stop_word
