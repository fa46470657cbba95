import pytest

from tfidf_tagger.config import ExtractorConfig
from tfidf_tagger.core.extractor import TagExtractor
from tfidf_tagger.core.segmentation import (
    JiebaPosSegmenter,
    SimpleSegmenter,
    WordTag,
    create_segmenter,
)
from tfidf_tagger.core.text_utils import clean_word, fold_case
from tfidf_tagger.errors import ConfigurationError, DictionaryLoadError


def test_text_utils():
    assert clean_word("　 关键词 \n") == "关键词"
    assert fold_case("JieBa") == "jieba"


def test_simple_segmenter_longest_match(dict_file):
    segmenter = SimpleSegmenter()
    segmenter.load_dictionary(dict_file)
    pairs = list(segmenter.cut("关键词抽取测试"))
    assert pairs == [WordTag("关键词", "n"), WordTag("抽取", "v"), WordTag("测试", "vn")]


def test_simple_segmenter_unknown_chunks(dict_file):
    segmenter = SimpleSegmenter()
    segmenter.load_dictionary(dict_file)
    pairs = list(segmenter.cut("你好世界测试 jieba2024"))
    assert pairs == [
        WordTag("你好", "x"),
        WordTag("世界", "x"),
        WordTag("测试", "vn"),
        WordTag(" ", "x"),
        WordTag("jieba2024", "eng"),
    ]


def test_simple_segmenter_without_tagging(dict_file):
    segmenter = SimpleSegmenter()
    segmenter.load_dictionary(dict_file)
    assert [pair.flag for pair in segmenter.cut("测试", pos_tagging=False)] == [""]


def test_simple_segmenter_missing_dictionary(tmp_path):
    with pytest.raises(DictionaryLoadError):
        SimpleSegmenter().load_dictionary(tmp_path / "missing.txt")


def test_unknown_backend():
    with pytest.raises(ConfigurationError):
        create_segmenter("ltp")


def test_jieba_segmenter_tags_words(dict_file):
    segmenter = JiebaPosSegmenter()
    segmenter.load_dictionary(dict_file)
    pairs = list(segmenter.cut("测试关键词抽取"))
    assert pairs == [WordTag("测试", "vn"), WordTag("关键词", "n"), WordTag("抽取", "v")]
    assert [pair.word for pair in segmenter.cut("测试关键词抽取", pos_tagging=False)] == [
        "测试",
        "关键词",
        "抽取",
    ]


def test_jieba_segmenter_missing_dictionary(tmp_path):
    with pytest.raises(DictionaryLoadError):
        JiebaPosSegmenter().load_dictionary(tmp_path / "missing.txt")


def test_jieba_segmenter_malformed_dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("测试\n", encoding="utf-8")
    with pytest.raises(DictionaryLoadError):
        JiebaPosSegmenter().load_dictionary(path)


def test_jieba_segmenter_empty_dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(DictionaryLoadError):
        JiebaPosSegmenter().load_dictionary(path)


def test_jieba_segmenter_requires_dictionary():
    with pytest.raises(ConfigurationError):
        list(JiebaPosSegmenter().cut("测试"))


def test_extract_with_jieba(dict_file, idf_file):
    config = ExtractorConfig(dictionary_path=str(dict_file), idf_path=str(idf_file))
    extractor = TagExtractor.from_config(config)
    tags = extractor.extract_tags("测试关键词抽取关键词", 2)
    assert tags.as_pairs() == [("关键词", pytest.approx(8.0 * 2 / 4)), ("抽取", pytest.approx(4.0 / 4))]
    assert extractor.extract_tags_with_pos("测试关键词抽取", 5, ["v"]).texts() == ["抽取"]


def test_jieba_segmenter_dictionary_without_pos_column(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("测试 100\n关键词 50 n\n抽取 40\n", encoding="utf-8")
    segmenter = JiebaPosSegmenter()
    segmenter.load_dictionary(path)
    pairs = list(segmenter.cut("测试关键词抽取"))
    assert pairs == [WordTag("测试", "x"), WordTag("关键词", "n"), WordTag("抽取", "x")]


def test_simple_segmenter_dictionary_without_pos_column(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("\ufeff测试 100\n关键词\n", encoding="utf-8")
    segmenter = SimpleSegmenter()
    segmenter.load_dictionary(path)
    assert list(segmenter.cut("关键词测试")) == [WordTag("关键词", "x"), WordTag("测试", "x")]
