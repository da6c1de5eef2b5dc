"""
搜索管理器 - 有序搜索的注册、执行和监控

提供统一的搜索接口，支持按名称注册和执行搜索算法、
线程池并发执行、批量执行以及执行指标统计。
"""

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .base import SearchAlgorithm
from .config import SearchConfig
from .errors import UnknownAlgorithmError
from .searching.binary_search import BinarySearch
from .searching.comparator_search import ComparatorSearch
from .searching.insertion_point import InsertionPointSearch


class SearchKind(Enum):
    """搜索类型枚举"""
    EXACT = "exact"
    INSERTION_POINT = "insertion_point"
    COMPARATOR = "comparator"


@dataclass
class SearchMetrics:
    """单次搜索的执行指标"""
    execution_time: float
    success: bool = True
    found: Optional[bool] = None
    input_size: Optional[int] = None
    error_message: Optional[str] = None


class SearchRegistry:
    """搜索算法注册表"""

    def __init__(self):
        self._algorithms: Dict[str, Type[SearchAlgorithm]] = {}
        self._kinds: Dict[str, SearchKind] = {}
        self._register_default_searches()

    def _register_default_searches(self) -> None:
        self.register("binary_search", BinarySearch, SearchKind.EXACT)
        self.register("insertion_point", InsertionPointSearch, SearchKind.INSERTION_POINT)
        self.register("comparator_search", ComparatorSearch, SearchKind.COMPARATOR)

    def register(self, name: str, algorithm_class: Type[SearchAlgorithm], kind: SearchKind) -> None:
        """
        注册搜索算法

        Args:
            name: 算法名称，重复注册会覆盖旧的实现
            algorithm_class: 算法类
            kind: 搜索类型

        Raises:
            TypeError: algorithm_class 不是 SearchAlgorithm 的子类
        """
        if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, SearchAlgorithm):
            raise TypeError(f"算法类 {algorithm_class!r} 必须继承自 SearchAlgorithm")

        self._algorithms[name] = algorithm_class
        self._kinds[name] = kind

    def get(self, name: str) -> Type[SearchAlgorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise UnknownAlgorithmError(f"未找到搜索算法: {name}")
        return self._algorithms[name]

    def kind_of(self, name: str) -> SearchKind:
        """获取搜索类型"""
        self.get(name)
        return self._kinds[name]

    def list_searches(self, kind: Optional[SearchKind] = None) -> List[str]:
        """列出已注册的搜索算法"""
        if kind is None:
            return list(self._algorithms.keys())
        return [name for name, k in self._kinds.items() if k == kind]


class SearchManager:
    """
    搜索管理器

    按名称执行已注册的搜索算法，记录执行指标。搜索本身是纯函数，
    多个线程可以同时搜索同一个未被修改的序列；指标记录由锁保护。
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.logger = logging.getLogger(__name__)
        self.registry = SearchRegistry()
        self.executor = ThreadPoolExecutor(max_workers=self.config.max_workers)
        self._metrics_history: Dict[str, List[SearchMetrics]] = {}
        self._lock = threading.Lock()

    def search(self, name: str, *args: Any) -> Any:
        """
        执行搜索

        Args:
            name: 算法名称
            *args: 传给算法 execute 的参数，例如 (data, target)

        Returns:
            搜索结果；精确匹配未找到时为 None

        Raises:
            UnknownAlgorithmError: 算法不存在
            Exception: 算法执行中抛出的异常会被记录后重新抛出
        """
        algorithm_class = self.registry.get(name)
        start_time = time.perf_counter()

        try:
            algorithm = algorithm_class(check_sorted=self.config.check_sorted)
            result = algorithm.execute(*args)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            if self.config.enable_metrics:
                self._record_metrics(name, SearchMetrics(
                    execution_time=execution_time,
                    success=False,
                    input_size=self._input_size(args),
                    error_message=str(e),
                ))
            self.logger.error(f"搜索 {name} 执行失败: {e}")
            raise

        execution_time = time.perf_counter() - start_time
        if self.config.enable_metrics:
            self._record_metrics(name, SearchMetrics(
                execution_time=execution_time,
                success=True,
                found=self._is_found(name, result),
                input_size=self._input_size(args),
            ))
        self.logger.debug(f"搜索 {name} 完成，结果: {result}，耗时: {execution_time:.6f}s")
        return result

    def search_async(self, name: str, *args: Any) -> Future:
        """在线程池中执行搜索，返回 Future"""
        return self.executor.submit(self.search, name, *args)

    def batch_search(self, tasks: List[Dict[str, Any]]) -> List[Any]:
        """
        并发执行一批搜索

        Args:
            tasks: 任务列表，每个任务形如 {"search": 名称, "args": [data, target, ...]}

        Returns:
            与任务顺序一致的结果列表，失败的任务对应 None
        """
        futures = [
            self.search_async(task["search"], *task.get("args", []))
            for task in tasks
        ]

        results = []
        for task, future in zip(tasks, futures):
            try:
                results.append(future.result())
            except Exception as e:
                self.logger.error(f"批量搜索任务 {task['search']} 失败: {e}")
                results.append(None)
        return results

    def get_metrics(self, name: str) -> List[SearchMetrics]:
        """获取搜索执行指标"""
        with self._lock:
            return list(self._metrics_history.get(name, []))

    def get_performance_summary(self, name: str) -> Dict[str, Any]:
        """
        获取搜索性能摘要

        Returns:
            性能摘要字典，没有记录时返回空字典
        """
        metrics = self.get_metrics(name)
        if not metrics:
            return {}

        successful = [m for m in metrics if m.success]
        if not successful:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful]
        summary = {
            "total_executions": len(metrics),
            "successful_executions": len(successful),
            "success_rate": len(successful) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times),
        }
        found_flags = [m.found for m in successful if m.found is not None]
        if found_flags:
            summary["hit_rate"] = sum(found_flags) / len(found_flags)
        return summary

    def _is_found(self, name: str, result: Any) -> Optional[bool]:
        # 插入位置搜索总有结果，不统计命中
        if self.registry.kind_of(name) == SearchKind.INSERTION_POINT:
            return None
        return result is not None

    def _input_size(self, args: tuple) -> Optional[int]:
        if args and hasattr(args[0], "__len__"):
            try:
                return len(args[0])
            except TypeError:
                return None
        return None

    def _record_metrics(self, name: str, metrics: SearchMetrics) -> None:
        with self._lock:
            history = self._metrics_history.setdefault(name, [])
            history.append(metrics)
            if len(history) > self.config.max_history:
                del history[:-self.config.max_history]

    def shutdown(self) -> None:
        """关闭线程池"""
        self.executor.shutdown(wait=True)

    def __enter__(self) -> "SearchManager":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()


# 全局搜索管理器实例
_search_manager = None
_search_manager_lock = threading.Lock()


def get_search_manager() -> SearchManager:
    """获取全局搜索管理器实例"""
    global _search_manager
    with _search_manager_lock:
        if _search_manager is None:
            _search_manager = SearchManager()
    return _search_manager


def execute_search(name: str, *args: Any) -> Any:
    """便捷函数：按名称执行搜索"""
    return get_search_manager().search(name, *args)
