from typing import Dict, Iterator, List, Tuple

import pytest

from tfidf_tagger.core.segmentation import WordTag
from tfidf_tagger.errors import DictionaryLoadError


class FakeSegmenter:
    """按预设表返回 (词, 词性) 的分词器，句子不在表中时按空格切分并标为 n。"""

    def __init__(self, table: Dict[str, List[Tuple[str, str]]] | None = None) -> None:
        self.table = table or {}
        self.loaded_path = None

    def load_dictionary(self, path) -> None:
        try:
            with open(path, "r", encoding="utf-8"):
                pass
        except OSError as exc:
            raise DictionaryLoadError(path, str(exc)) from exc
        self.loaded_path = str(path)

    def cut(self, sentence: str, pos_tagging: bool = True) -> Iterator[WordTag]:
        pairs = self.table.get(sentence)
        if pairs is None:
            pairs = [(word, "n") for word in sentence.split(" ")]
        for word, flag in pairs:
            yield WordTag(word=word, flag=flag if pos_tagging else "")


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("测试 100 vn\n关键词 50 n\n抽取 40 v\n", encoding="utf-8")
    return path


@pytest.fixture
def idf_file(tmp_path):
    path = tmp_path / "idf.txt"
    path.write_text("测试 2.0\n关键词 8.0\n抽取 4.0\n", encoding="utf-8")
    return path


@pytest.fixture
def fake_segmenter():
    return FakeSegmenter
