"""二分搜索插入位置实现。"""
from typing import Any, Sequence

from ..base import SearchAlgorithm
from ..utils import midpoint


class InsertionPointSearch(SearchAlgorithm):
    """查找目标值在有序序列中的插入位置。

    与 BinarySearch 使用相同的循环，但在搜索区间为空时返回 low
    而不是“未找到”。此时 low 正好位于“小于目标值”和
    “大于目标值”的元素分界处，在该位置插入目标值后序列仍然有序。

    如果序列中存在等于目标值的元素，返回其中某一个的索引
    （不保证是第一个或最后一个）。
    """

    def execute(self, data: Sequence[Any], target: Any) -> int:
        """返回目标值的插入位置。

        参数:
            data: 已排序的序列（非递减）
            target: 要定位的目标值

        返回:
            int: [0, len(data)] 范围内的插入位置；空序列返回 0

        时间复杂度: O(log n)
        空间复杂度: O(1)

        示例:
            >>> InsertionPointSearch().execute([1, 3, 5, 7], 4)
            2
            >>> InsertionPointSearch().execute([1, 3, 5, 7], 9)
            4
        """
        self._ensure_sorted(data)
        low, high = 0, len(data) - 1

        while low <= high:
            mid = midpoint(low, high)
            value = data[mid]

            if value == target:
                return mid
            elif value < target:
                low = mid + 1
            else:
                high = mid - 1

        return low


def binary_search_insertion_point(data: Sequence[Any], target: Any) -> int:
    """便捷函数：返回 target 在已排序序列中的插入位置。"""
    return InsertionPointSearch().execute(data, target)
