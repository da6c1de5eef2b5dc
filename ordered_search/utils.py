"""搜索算法的通用类型和辅助函数。

本模块提供有序搜索中共用的比较器类型、自然顺序比较器、
防溢出的中点计算以及有序性检查。
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

Comparator = Callable[[Any, Any], float]


def natural_comparator(element: Any, target: Any) -> int:
    """按自然顺序比较元素和目标值。

    参数:
        element: 序列中的元素
        target: 目标值

    返回:
        int: element < target 时为 -1，相等时为 0，element > target 时为 1

    示例:
        >>> natural_comparator(1, 2)
        -1
        >>> natural_comparator("b", "a")
        1
    """
    return (element > target) - (element < target)


def midpoint(low: int, high: int) -> int:
    """计算 [low, high] 区间的中点。

    使用 ``low + (high - low) // 2`` 的形式，与 ``(low + high) // 2``
    结果相同，但不依赖两端之和的大小。

    时间复杂度: O(1)
    空间复杂度: O(1)
    """
    return low + (high - low) // 2


def is_sorted(data: Sequence[Any], key: Optional[Callable[[Any], Any]] = None) -> bool:
    """检查序列是否非递减。

    参数:
        data: 要检查的序列
        key: 可选的取键函数，与 ``sorted`` 的 key 参数含义相同

    返回:
        bool: 序列非递减时返回 True

    时间复杂度: O(n)
    """
    return first_unsorted_index(data, key) is None


def first_unsorted_index(data: Sequence[Any], key: Optional[Callable[[Any], Any]] = None) -> Optional[int]:
    """返回第一个小于前一元素的位置，序列有序时返回 None。"""
    previous = None
    for i in range(len(data)):
        current = data[i] if key is None else key(data[i])
        if i > 0 and current < previous:
            return i
        previous = current
    return None
