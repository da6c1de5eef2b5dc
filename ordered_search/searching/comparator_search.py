"""基于比较函数的二分搜索实现。"""
from typing import Any, Optional, Sequence

from ..base import SearchAlgorithm
from ..utils import Comparator, midpoint


class ComparatorSearch(SearchAlgorithm):
    """使用自定义比较函数在有序序列中查找目标。

    控制流程与 BinarySearch 完全相同，只是每一步的比较都交给
    ``comparator(element, target)``：

        - 返回 0：匹配，返回当前索引
        - 返回负数：元素小于目标，搜索右半部分
        - 返回正数：元素大于目标，搜索左半部分

    目标值的类型可以与元素类型不同，例如按 id 查找记录。
    序列的顺序必须与比较函数隐含的顺序一致。

    由于比较函数只比较元素与目标，无法据此校验序列本身是否有序，
    因此 check_sorted 对本算法不起作用。
    """

    def execute(self, data: Sequence[Any], target: Any, comparator: Comparator) -> Optional[int]:
        """按比较函数查找目标的索引。

        参数:
            data: 按比较函数顺序排列的序列
            target: 目标值，类型可以与元素不同
            comparator: 三路比较函数 (element, target) -> 数值

        返回:
            Optional[int]: 匹配元素的索引，未找到返回 None

        时间复杂度: O(log n) 次比较函数调用
        空间复杂度: O(1)

        示例:
            >>> users = [{"id": 1}, {"id": 2}, {"id": 3}]
            >>> ComparatorSearch().execute(users, 2, lambda u, t: u["id"] - t)
            1
        """
        low, high = 0, len(data) - 1

        while low <= high:
            mid = midpoint(low, high)
            order = comparator(data[mid], target)

            if order == 0:
                return mid
            elif order < 0:
                low = mid + 1
            else:
                high = mid - 1

        return None


def binary_search_with_comparator(data: Sequence[Any], target: Any, comparator: Comparator) -> Optional[int]:
    """便捷函数：使用 comparator 在有序序列中查找 target，未找到返回 None。"""
    return ComparatorSearch().execute(data, target, comparator)
