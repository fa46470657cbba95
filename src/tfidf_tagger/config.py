"""全局配置与默认参数。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def _jieba_resource(*parts: str) -> str:
    import jieba

    return str(Path(jieba.__file__).resolve().parent.joinpath(*parts))


@dataclass
class ExtractorConfig:
    """关键词抽取的可调参数集合。

    注意：默认词典路径指向 jieba 自带的资源文件，真实项目中应换成领域词典。
    """

    # 分词词典（jieba 格式：词 词频 词性）
    dictionary_path: str = field(default_factory=lambda: _jieba_resource("dict.txt"))
    # IDF 词典（两列：词 权重）
    idf_path: str = field(default_factory=lambda: _jieba_resource("analyse", "idf.txt"))
    # 停用词表（每行一个词），None 表示不过滤
    stop_words_path: str | None = None
    # 分词后端：jieba 或 simple
    segmenter_backend: str = "jieba"
    # jieba 是否用 HMM 识别未登录词
    hmm: bool = True
    # 未指定 top_k 时返回的关键词数量
    default_top_k: int = 20
    # 候选词最短长度（按 Unicode 码点计）
    min_word_length: int = 2
