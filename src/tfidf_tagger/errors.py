"""异常类型定义。"""

from __future__ import annotations

from pathlib import Path


class TaggerError(Exception):
    """本包所有异常的基类。"""


class ConfigurationError(TaggerError):
    """词典、停用词或 IDF 来源缺失、不可读或格式错误。"""


class DictionaryLoadError(ConfigurationError):
    """加载某个词典文件失败。"""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"无法加载词典 {self.path}：{reason}")


class NotInitializedError(TaggerError):
    """在分词词典或 IDF 词典加载之前调用了抽取。"""
