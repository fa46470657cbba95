"""候选词清洗工具。"""

from __future__ import annotations


def clean_word(text: str) -> str:
    """去掉词两侧的空白（包括全角空格）。"""

    if not text:
        return ""
    return text.strip()


def fold_case(text: str) -> str:
    """停用词查询使用的大小写折叠。"""

    return text.lower()


def is_cjk(char: str) -> bool:
    return "\u4e00" <= char <= "\u9fff"
