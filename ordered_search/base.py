import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from .errors import UnsortedSequenceError
from .utils import first_unsorted_index


class SearchAlgorithm(ABC):
    """所有有序搜索算法的基类。

    这是一个抽象基类，定义了搜索算法的通用接口。
    具体的搜索实现都应该继承这个类并实现 execute 方法。

    参数:
        check_sorted: 为 True 时，执行前校验输入序列是否非递减，
            不满足则抛出 UnsortedSequenceError。默认关闭，
            此时输入有序由调用方保证。

    子类必须实现:
        execute: 执行搜索并返回结果的抽象方法
    """

    def __init__(self, check_sorted: bool = False) -> None:
        self.check_sorted = check_sorted
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def execute(self, data: Sequence[Any], target: Any, *args: Any) -> Optional[int]:
        """在有序序列中执行搜索并返回索引。

        参数:
            data: 已排序的序列
            target: 要查找或定位的目标值
            *args: 额外参数，具体取决于算法实现

        返回:
            Optional[int]: 索引；未找到时由具体算法决定返回 None 或插入位置
        """
        raise NotImplementedError

    def _ensure_sorted(self, data: Sequence[Any]) -> None:
        if not self.check_sorted:
            return
        index = first_unsorted_index(data)
        if index is not None:
            raise UnsortedSequenceError(index)
