"""
有序搜索性能基准测试

对已注册的搜索算法在不同数据规模下计时，汇总统计结果，
并可将结果保存为 JSON 文件以便对比。
"""

import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from ..search_manager import SearchKind, SearchManager
from ..utils import natural_comparator


class BenchmarkStatus(Enum):
    """基准测试状态"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    search_name: str
    test_sizes: List[int]
    iterations: int = 3
    queries: int = 1000  # 每次迭代的查询次数
    hit_ratio: float = 0.5  # 查询中命中的比例
    warmup_iterations: int = 1
    seed: Optional[int] = None
    unique_ratio: Optional[float] = None  # 设置后使用重复元素较多的数据


@dataclass
class PerformanceMetrics:
    """一次迭代的性能指标"""
    search_name: str
    input_size: int
    queries: int
    execution_time: float
    hits: int = 0
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # 每秒查询次数
        if self.throughput is None and self.execution_time > 0:
            self.throughput = self.queries / self.execution_time


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    config: BenchmarkConfig
    status: BenchmarkStatus
    start_time: str
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def summary_statistics(self) -> Dict[str, Any]:
        """按数据规模分组的统计信息"""
        size_groups: Dict[int, List[PerformanceMetrics]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric)

        summary = {}
        for size, group in size_groups.items():
            times = [m.execution_time for m in group]
            size_summary = {
                "input_size": size,
                "sample_count": len(times),
                "execution_time": _describe(times),
            }
            throughputs = [m.throughput for m in group if m.throughput]
            if throughputs:
                size_summary["throughput"] = _describe(throughputs)
            summary[f"size_{size}"] = size_summary

        return summary

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["summary"] = self.summary_statistics()
        return data


def _describe(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.stdev(values) if len(values) > 1 else 0.0,
        "min": min(values),
        "max": max(values),
    }


class DataGenerator:
    """测试数据生成器，所有数据均已排序"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    @staticmethod
    def sorted_integers(size: int) -> List[int]:
        """生成严格递增的偶数列表，奇数一定不在其中"""
        return list(range(0, 2 * size, 2))

    def sorted_with_duplicates(self, size: int, unique_ratio: float = 0.1) -> List[int]:
        """生成重复元素较多的有序数据"""
        unique_count = max(1, int(size * unique_ratio))
        values = self.rng.integers(0, unique_count, size)
        return np.sort(values).tolist()

    def random_targets(self, data: List[int], count: int, hit_ratio: float = 0.5) -> List[int]:
        """
        生成查询目标

        Args:
            data: 已排序的整数数据
            count: 目标数量
            hit_ratio: 存在于 data 中的目标所占比例

        Returns:
            打乱顺序后的目标列表
        """
        if not data:
            return self.rng.integers(0, max(count, 1), count).tolist()

        hit_count = int(count * hit_ratio)
        hits = self.rng.choice(np.asarray(data), hit_count).tolist() if hit_count else []

        present = set(data)
        low, high = data[0], data[-1]
        misses: List[int] = []
        while len(misses) < count - hit_count:
            candidates = self.rng.integers(low - 1, high + 2, count).tolist()
            misses.extend(c for c in candidates if c not in present)
        misses = misses[:count - hit_count]

        targets = hits + misses
        self.rng.shuffle(targets)
        return targets


class SearchBenchmark:
    """
    搜索性能基准测试

    通过 SearchManager 的注册表取得算法，对每个数据规模执行多轮查询计时。
    """

    def __init__(self, manager: Optional[SearchManager] = None,
                 results_dir: Union[str, Path, None] = None):
        """
        Args:
            manager: 提供算法注册表和配置的搜索管理器
            results_dir: 结果保存目录；为 None 时不写文件
        """
        self.manager = manager or SearchManager()
        self.results_dir = Path(results_dir) if results_dir is not None else None
        if self.results_dir is not None:
            self.results_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(__name__)

    def run(self, config: BenchmarkConfig) -> BenchmarkResult:
        """
        运行基准测试

        Args:
            config: 测试配置

        Returns:
            测试结果；执行失败时状态为 FAILED 并记录错误信息
        """
        result = BenchmarkResult(
            config=config,
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat(),
        )
        generator = DataGenerator(config.seed)

        try:
            algorithm = self.manager.registry.get(config.search_name)(
                check_sorted=self.manager.config.check_sorted
            )
            kind = self.manager.registry.kind_of(config.search_name)
            self.logger.info(f"开始基准测试: {config.search_name}")

            for size in config.test_sizes:
                data = self._generate_data(generator, size, config.unique_ratio)
                targets = generator.random_targets(data, config.queries, config.hit_ratio)
                self.logger.info(f"测试数据大小: {size}")

                for _ in range(config.warmup_iterations):
                    self._run_queries(algorithm, kind, data, targets)

                for _ in range(config.iterations):
                    start = time.perf_counter()
                    hits = self._run_queries(algorithm, kind, data, targets)
                    elapsed = time.perf_counter() - start
                    result.metrics.append(PerformanceMetrics(
                        search_name=config.search_name,
                        input_size=size,
                        queries=len(targets),
                        execution_time=elapsed,
                        hits=hits,
                    ))

            result.status = BenchmarkStatus.COMPLETED
            self.logger.info(f"基准测试完成: {config.search_name}")

        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error(f"基准测试失败: {config.search_name} - {e}")

        finally:
            result.end_time = datetime.now().isoformat()
            if self.results_dir is not None:
                self._save_result(result)

        return result

    def compare(self, search_names: List[str], test_sizes: List[int],
                iterations: int = 3, queries: int = 1000,
                seed: Optional[int] = None,
                unique_ratio: Optional[float] = None) -> Dict[str, BenchmarkResult]:
        """对多个搜索算法使用相同参数运行基准测试"""
        return {
            name: self.run(BenchmarkConfig(
                search_name=name,
                test_sizes=test_sizes,
                iterations=iterations,
                queries=queries,
                seed=seed,
                unique_ratio=unique_ratio,
            ))
            for name in search_names
        }

    @staticmethod
    def _generate_data(generator: DataGenerator, size: int, unique_ratio: Optional[float]) -> List[int]:
        if unique_ratio is None:
            return generator.sorted_integers(size)
        return generator.sorted_with_duplicates(size, unique_ratio)

    @staticmethod
    def _run_queries(algorithm, kind: SearchKind, data: List[int], targets: List[int]) -> int:
        hits = 0
        if kind == SearchKind.COMPARATOR:
            for target in targets:
                if algorithm.execute(data, target, natural_comparator) is not None:
                    hits += 1
        elif kind == SearchKind.INSERTION_POINT:
            n = len(data)
            for target in targets:
                index = algorithm.execute(data, target)
                if index < n and data[index] == target:
                    hits += 1
        else:
            for target in targets:
                if algorithm.execute(data, target) is not None:
                    hits += 1
        return hits

    def _save_result(self, result: BenchmarkResult) -> Path:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        result_file = self.results_dir / f"{result.config.search_name}_{stamp}.json"
        with open(result_file, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
        return result_file
