"""二分搜索算法实现。"""
from typing import Any, Optional, Sequence

from ..base import SearchAlgorithm
from ..utils import midpoint


class BinarySearch(SearchAlgorithm):
    """使用二分搜索技术在已排序序列中查找元素。

    二分搜索是一种高效的搜索算法，通过反复将搜索区间对半分割，
    快速定位目标元素。前提条件是数据必须已经按自然顺序排序。

    算法原理：
        1. 比较中间元素与目标值
        2. 如果相等，返回索引
        3. 如果中间元素小于目标值，搜索右半部分
        4. 如果中间元素大于目标值，搜索左半部分
        5. 重复直到找到目标或搜索区间为空

    存在多个相等元素时，返回其中某一个的索引，不保证是第一个或最后一个。
    """

    def execute(self, data: Sequence[Any], target: Any) -> Optional[int]:
        """在已排序的数据中查找目标值的索引。

        参数:
            data: 已排序的序列（非递减）
            target: 要查找的目标值

        返回:
            Optional[int]: 目标值的索引，如果未找到则返回 None

        时间复杂度: O(log n) - 每次搜索范围减半
        空间复杂度: O(1) - 只使用常数额外空间

        注意:
            输入数据必须已经排序，否则结果不可靠

        示例:
            >>> searcher = BinarySearch()
            >>> searcher.execute([1, 3, 5, 7, 9], 5)
            2
            >>> searcher.execute([1, 3, 5, 7, 9], 6) is None
            True
        """
        self._ensure_sorted(data)
        low, high = 0, len(data) - 1

        while low <= high:
            mid = midpoint(low, high)
            value = data[mid]

            if value == target:
                return mid
            elif value < target:  # 搜索右半部分
                low = mid + 1
            else:  # 搜索左半部分
                high = mid - 1

        return None


def binary_search(data: Sequence[Any], target: Any) -> Optional[int]:
    """便捷函数：在已排序序列中查找 target，未找到返回 None。"""
    return BinarySearch().execute(data, target)
