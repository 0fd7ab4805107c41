"""
算法管理器

按名称注册和执行排序与图遍历算法，记录每次执行的耗时、成功与否以及
本次执行新增的排序计数。
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .base import Algorithm
from .graph.basic.bfs import BreadthFirstSearch
from .graph.basic.dfs import DepthFirstSearch
from .sorting.advanced.merge_sort import MergeSort
from .sorting.basic.bubble_sort import BubbleSort
from .sorting.basic.counting_sort import CountingSort
from .sorting.basic.insertion_sort import InsertionSort
from .sorting.basic.quick_sort import QuickSort
from .stats import RuntimeStats
from .utils import Graph


class AlgorithmCategory(Enum):
    """算法分类枚举"""
    SORTING = "sorting"
    GRAPH = "graph"


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None
    stats: Optional[Dict[str, int]] = None


@dataclass
class AlgorithmConfig:
    """算法配置"""
    enable_metrics: bool = True  # 是否启用指标收集
    max_history: int = 1000      # 每个算法保留的指标条数

    def __post_init__(self):
        if self.max_history < 1:
            raise ValueError(f"max_history 必须大于 0，得到: {self.max_history}")


class AlgorithmRegistry:
    """算法注册表"""

    def __init__(self):
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self._categories: Dict[str, AlgorithmCategory] = {}
        self._configs: Dict[str, AlgorithmConfig] = {}
        self._register_default_algorithms()

    def _register_default_algorithms(self) -> None:
        """注册默认算法"""
        # 排序算法
        self.register("bubble_sort", BubbleSort, AlgorithmCategory.SORTING)
        self.register("insertion_sort", InsertionSort, AlgorithmCategory.SORTING)
        self.register("merge_sort", MergeSort, AlgorithmCategory.SORTING)
        self.register("quick_sort", QuickSort, AlgorithmCategory.SORTING)
        self.register("counting_sort", CountingSort, AlgorithmCategory.SORTING)

        # 图算法
        self.register("bfs", BreadthFirstSearch, AlgorithmCategory.GRAPH)
        self.register("dfs", DepthFirstSearch, AlgorithmCategory.GRAPH)

    def register(self, name: str, algorithm_class: Type[Algorithm],
                 category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
        """
        注册算法

        Args:
            name: 算法名称
            algorithm_class: 算法类
            category: 算法分类
            config: 算法配置
        """
        if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, Algorithm):
            raise ValueError(f"算法类 {algorithm_class} 必须继承自 Algorithm")

        self._algorithms[name] = algorithm_class
        self._categories[name] = category
        self._configs[name] = config or AlgorithmConfig()

    def unregister(self, name: str) -> None:
        self._algorithms.pop(name, None)
        self._categories.pop(name, None)
        self._configs.pop(name, None)

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise KeyError(f"未找到算法: {name}")
        return self._algorithms[name]

    def get_category(self, name: str) -> Optional[AlgorithmCategory]:
        return self._categories.get(name)

    def get_config(self, name: str) -> AlgorithmConfig:
        return self._configs.get(name, AlgorithmConfig())

    def list_algorithms(self, category: Optional[AlgorithmCategory] = None) -> List[str]:
        """列出算法"""
        if category is None:
            return list(self._algorithms.keys())
        return [name for name, cat in self._categories.items() if cat == category]


class AlgorithmManager:
    """
    算法管理器

    提供统一的算法执行入口，记录执行指标。算法抛出的异常在记录后原样传播。
    """

    def __init__(self, registry: Optional[AlgorithmRegistry] = None):
        self.logger = logging.getLogger(__name__)
        self.registry = registry or AlgorithmRegistry()
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}

    def execute_algorithm(self, algorithm_name: str, *args, **kwargs) -> Any:
        """
        执行算法

        Args:
            algorithm_name: 算法名称
            *args: 算法参数
            **kwargs: 算法关键字参数

        Returns:
            算法执行结果

        Raises:
            KeyError: 算法不存在
            Exception: 算法执行错误
        """
        algorithm_class = self.registry.get_algorithm(algorithm_name)
        config = self.registry.get_config(algorithm_name)
        stats = self._find_stats(args, kwargs)
        stats_before = stats.snapshot() if stats is not None else None

        start_time = time.perf_counter()

        try:
            algorithm = algorithm_class()
            result = algorithm.execute(*args, **kwargs)

            execution_time = time.perf_counter() - start_time

            if config.enable_metrics:
                metrics = AlgorithmMetrics(
                    execution_time=execution_time,
                    success=True,
                    input_size=self._estimate_input_size(args, kwargs),
                    stats=self._stats_delta(stats, stats_before),
                )
                self._record_metrics(algorithm_name, metrics, config)

            self.logger.info("算法 %s 执行成功，耗时: %.4fs", algorithm_name, execution_time)
            return result

        except Exception as e:
            execution_time = time.perf_counter() - start_time

            if config.enable_metrics:
                metrics = AlgorithmMetrics(
                    execution_time=execution_time,
                    success=False,
                    error_message=str(e),
                    input_size=self._estimate_input_size(args, kwargs),
                    stats=self._stats_delta(stats, stats_before),
                )
                self._record_metrics(algorithm_name, metrics, config)

            self.logger.error("算法 %s 执行失败: %s", algorithm_name, e)
            raise

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        return self._metrics_history.get(algorithm_name, [])

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        获取算法性能摘要

        Returns:
            性能摘要字典，没有执行记录时为空字典
        """
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times)
        }

    def clear_metrics(self, algorithm_name: Optional[str] = None) -> None:
        if algorithm_name is None:
            self._metrics_history.clear()
        else:
            self._metrics_history.pop(algorithm_name, None)

    def _estimate_input_size(self, args: tuple, kwargs: dict) -> Optional[int]:
        """估算输入数据大小"""
        total_size = 0
        for value in list(args) + list(kwargs.values()):
            if isinstance(value, (list, tuple, Graph)):
                total_size += len(value)
        return total_size if total_size > 0 else None

    def _find_stats(self, args: tuple, kwargs: dict) -> Optional[RuntimeStats]:
        """返回参数中的 RuntimeStats"""
        for value in list(args) + list(kwargs.values()):
            if isinstance(value, RuntimeStats):
                return value
        return None

    @staticmethod
    def _stats_delta(stats: Optional[RuntimeStats],
                     before: Optional[RuntimeStats]) -> Optional[Dict[str, int]]:
        """本次执行新增的计数，调用方复用同一个 RuntimeStats 时不含之前的累计值"""
        if stats is None:
            return None
        return {name: value - getattr(before, name) for name, value in stats.as_dict().items()}

    def _record_metrics(self, algorithm_name: str, metrics: AlgorithmMetrics,
                        config: AlgorithmConfig) -> None:
        """记录算法执行指标"""
        history = self._metrics_history.setdefault(algorithm_name, [])
        history.append(metrics)

        # 限制历史记录数量
        if len(history) > config.max_history:
            del history[:-config.max_history]


# 全局算法管理器实例
_algorithm_manager = None


def get_algorithm_manager() -> AlgorithmManager:
    """获取全局算法管理器实例"""
    global _algorithm_manager
    if _algorithm_manager is None:
        _algorithm_manager = AlgorithmManager()
    return _algorithm_manager


def execute_algorithm(algorithm_name: str, *args, **kwargs) -> Any:
    """便捷函数：执行算法"""
    return get_algorithm_manager().execute_algorithm(algorithm_name, *args, **kwargs)


def register_algorithm(name: str, algorithm_class: Type[Algorithm],
                       category: AlgorithmCategory, config: Optional[AlgorithmConfig] = None) -> None:
    """便捷函数：注册算法"""
    get_algorithm_manager().registry.register(name, algorithm_class, category, config)
