"""带权重的关键词及其排序规则。"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Tuple


@dataclass(frozen=True)
class WeightedTerm:
    """一个打过分的候选关键词。"""

    text: str
    weight: float


def compare(left: WeightedTerm, right: WeightedTerm) -> int:
    """权重升序，权重相同时按文本升序（码点序）。

    调用方通过取反组合出降序；抽取流程只取反权重部分，文本始终升序。
    """

    if left.weight != right.weight:
        return -1 if left.weight < right.weight else 1
    if left.text == right.text:
        return 0
    return -1 if left.text < right.text else 1


def _descending(left: WeightedTerm, right: WeightedTerm) -> int:
    if left.weight != right.weight:
        return compare(right, left)
    return compare(left, right)


descending_key = cmp_to_key(_descending)


class WeightedTermList(List[WeightedTerm]):
    """抽取结果：有序的 WeightedTerm 序列，每次调用新建。"""

    def sort_descending(self) -> "WeightedTermList":
        self.sort(key=descending_key)
        return self

    def top(self, k: int) -> "WeightedTermList":
        if k <= 0:
            return WeightedTermList()
        return WeightedTermList(self[:k])

    def texts(self) -> List[str]:
        return [term.text for term in self]

    def as_pairs(self) -> List[Tuple[str, float]]:
        return [(term.text, term.weight) for term in self]
