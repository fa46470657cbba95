"""IDF 词典：词 → 逆文档频率权重，以及未登录词使用的中位数兜底值。"""

from __future__ import annotations

import logging
import math
import warnings
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..errors import DictionaryLoadError

logger = logging.getLogger(__name__)


def _parse_weight(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value) or value < 0:
        return None
    return value


class Idf:
    """加载后只读的 IDF 表。

    - 中位数在加载时一次算好，取排序后下标 len // 2 的值（与 jieba.analyse 一致），
      偶数个权重时是偏上的那个，不取平均；
    - 空表的中位数没有定义，因此加载到空来源视为加载失败。
    """

    def __init__(self) -> None:
        self._weights: Mapping[str, float] = MappingProxyType({})
        self._median = 0.0

    @property
    def median(self) -> float:
        return self._median

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, term: object) -> bool:
        return term in self._weights

    def frequency(self, term: str) -> Tuple[float, bool]:
        """查询词的 IDF 权重，第二项表示是否命中。"""

        weight = self._weights.get(term)
        if weight is None:
            return 0.0, False
        return weight, True

    def load_dictionary(self, path: str | Path) -> None:
        """读取两列文本（词 权重），整体替换当前内容。"""

        file_path = Path(path)
        weights: Dict[str, float] = {}
        try:
            with file_path.open("r", encoding="utf-8") as handle:
                for line_number, line in enumerate(handle, start=1):
                    parts = line.split()
                    if not parts:
                        continue
                    if len(parts) != 2:
                        raise DictionaryLoadError(
                            file_path, f"第 {line_number} 行应为“词 权重”两列：{line.strip()!r}"
                        )
                    weight = _parse_weight(parts[1])
                    if weight is None:
                        raise DictionaryLoadError(
                            file_path, f"第 {line_number} 行权重无效：{parts[1]!r}"
                        )
                    weights[parts[0]] = weight
        except OSError as exc:
            raise DictionaryLoadError(file_path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise DictionaryLoadError(file_path, f"不是 UTF-8 文本：{exc}") from exc
        self._replace(weights, source=file_path)
        logger.info("IDF 词典已加载：%s（%d 条，中位数 %.6f）", file_path, len(weights), self._median)

    @classmethod
    def from_file(cls, path: str | Path) -> "Idf":
        idf = cls()
        idf.load_dictionary(path)
        return idf

    @classmethod
    def from_mapping(cls, weights: Mapping[str, float]) -> "Idf":
        checked: Dict[str, float] = {}
        for term, raw in weights.items():
            weight = _parse_weight(str(raw))
            if weight is None:
                raise DictionaryLoadError("<mapping>", f"词 {term!r} 的权重无效：{raw!r}")
            checked[term] = weight
        idf = cls()
        idf._replace(checked, source="<mapping>")
        return idf

    def _replace(self, weights: Dict[str, float], source: str | Path) -> None:
        if not weights:
            raise DictionaryLoadError(source, "IDF 词典为空，无法计算中位数")
        values = sorted(weights.values())
        median = values[len(values) // 2]
        if median == 0.0:
            warnings.warn(
                f"IDF 词典 {source} 的中位数为 0，未登录词将得到 0 权重。",
                RuntimeWarning,
            )
        self._weights = MappingProxyType(weights)
        self._median = median
