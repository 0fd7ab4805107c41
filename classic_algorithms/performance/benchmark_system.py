"""
排序算法基准测试系统

在不同规模和不同分布的数据上运行排序算法，同时记录执行耗时和
RuntimeStats 计数器，用于比较各算法的步数增长情况以及做步数回归测试。
步数对给定输入是确定的，因此回归测试比较的是步数而不是耗时。
"""

import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np

from ..stats import RuntimeStats

SortFunction = Callable[[List[Any], RuntimeStats], Any]


class BenchmarkStatus(Enum):
    """基准测试状态"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    algorithm_name: str
    test_sizes: List[int]
    iterations: int = 3
    data_pattern: str = "random"
    seed: Optional[int] = None


@dataclass
class PerformanceMetrics:
    """单次运行的性能指标"""
    algorithm_name: str
    input_size: int
    execution_time: float
    comparisons: int = 0
    swaps: int = 0
    insertions: int = 0
    operations: int = 0
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    config: BenchmarkConfig
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    status: BenchmarkStatus = BenchmarkStatus.PENDING
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """按输入规模汇总耗时和计数器的统计信息"""
        if not self.metrics:
            return {}

        size_groups: Dict[int, List[PerformanceMetrics]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric)

        summary = {}
        for size, group_metrics in size_groups.items():
            summary[f"size_{size}"] = {
                "input_size": size,
                "sample_count": len(group_metrics),
                "execution_time": _describe([m.execution_time for m in group_metrics]),
                "comparisons": _describe([m.comparisons for m in group_metrics]),
                "swaps": _describe([m.swaps for m in group_metrics]),
                "insertions": _describe([m.insertions for m in group_metrics]),
            }

        return summary


def _describe(values: List[Union[int, float]]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.stdev(values) if len(values) > 1 else 0,
        "min": min(values),
        "max": max(values),
    }


class DataGenerator:
    """测试数据生成器，所有数据均为非负整数，可直接用于计数排序"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def generate(self, pattern: str, size: int) -> List[int]:
        generators = {
            "random": self.generate_random_integers,
            "sorted": self.generate_sorted_integers,
            "reversed": lambda n: self.generate_sorted_integers(n, reverse=True),
            "nearly_sorted": self.generate_nearly_sorted,
            "duplicates": self.generate_duplicate_heavy,
        }
        if pattern not in generators:
            raise ValueError(f"未知的数据模式: {pattern}")
        return generators[pattern](size)

    def generate_random_integers(self, size: int, min_val: int = 0, max_val: Optional[int] = None) -> List[int]:
        """生成随机整数列表"""
        if max_val is None:
            max_val = max(size * 2, 1)
        return self.rng.integers(min_val, max_val, size).tolist()

    @staticmethod
    def generate_sorted_integers(size: int, reverse: bool = False) -> List[int]:
        """生成有序整数列表"""
        data = list(range(size))
        return data[::-1] if reverse else data

    def generate_nearly_sorted(self, size: int, disorder_ratio: float = 0.1) -> List[int]:
        """生成接近有序的数据"""
        data = list(range(size))
        if size < 2:
            return data
        for _ in range(int(size * disorder_ratio)):
            i, j = self.rng.choice(size, 2, replace=False)
            data[i], data[j] = data[j], data[i]
        return data

    def generate_duplicate_heavy(self, size: int, unique_ratio: float = 0.1) -> List[int]:
        """生成重复元素较多的数据"""
        unique_count = max(1, int(size * unique_ratio))
        return self.rng.integers(0, unique_count, size).tolist()


class PerformanceBenchmark:
    """
    排序算法基准测试系统

    results_dir 为 None 时不写文件，只返回结果对象。
    配置了结果目录时，实例使用自己的子 logger 把 INFO 日志写入
    results_dir/benchmark.log，用完后应调用 close() 关闭日志文件。
    """

    def __init__(self, results_dir: Optional[Union[str, Path]] = None):
        self.logger = logging.getLogger(__name__)
        self._file_handler: Optional[logging.FileHandler] = None
        self.results_dir = Path(results_dir) if results_dir is not None else None
        if self.results_dir is not None:
            self.results_dir.mkdir(parents=True, exist_ok=True)
            self._setup_logging()

    def _setup_logging(self) -> None:
        """把基准测试日志同时写入结果目录"""
        log_file = self.results_dir / "benchmark.log"
        self.logger = logging.getLogger(f"{__name__}.{id(self)}")
        self.logger.setLevel(logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)
        self._file_handler = file_handler

    def close(self) -> None:
        """移除并关闭结果目录的日志文件"""
        if self._file_handler is None:
            return
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    def __enter__(self) -> "PerformanceBenchmark":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def run_benchmark(self, algorithm_func: SortFunction, config: BenchmarkConfig) -> BenchmarkResult:
        """
        运行基准测试

        Args:
            algorithm_func: 排序函数，签名为 func(data, stats)
            config: 测试配置

        Returns:
            测试结果；算法抛出异常时状态为 FAILED 并记录错误信息
        """
        result = BenchmarkResult(
            config=config,
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat()
        )
        generator = DataGenerator(config.seed)

        try:
            self.logger.info("开始基准测试: %s", config.algorithm_name)

            for size in config.test_sizes:
                test_data = generator.generate(config.data_pattern, size)
                for _ in range(config.iterations):
                    result.metrics.append(
                        self._measure_performance(algorithm_func, test_data, config.algorithm_name, size)
                    )

            result.status = BenchmarkStatus.COMPLETED
            self.logger.info("基准测试完成: %s", config.algorithm_name)

        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error("基准测试失败: %s - %s", config.algorithm_name, e)

        finally:
            result.end_time = datetime.now().isoformat()

        if self.results_dir is not None:
            benchmark_id = f"{config.algorithm_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
            self.save_result(result, self.results_dir / f"{benchmark_id}.json")

        return result

    def run_comparative_benchmark(self, algorithms: Dict[str, SortFunction],
                                  test_sizes: List[int], iterations: int = 3,
                                  data_pattern: str = "random",
                                  seed: Optional[int] = None) -> Dict[str, BenchmarkResult]:
        """
        在相同数据上运行多个排序算法

        Args:
            algorithms: 算法字典 {名称: 函数}
            test_sizes: 测试数据大小列表
            iterations: 迭代次数
            data_pattern: 数据模式
            seed: 随机种子，相同种子保证各算法使用相同数据

        Returns:
            测试结果字典
        """
        results = {}
        for name, algorithm_func in algorithms.items():
            config = BenchmarkConfig(
                algorithm_name=name,
                test_sizes=test_sizes,
                iterations=iterations,
                data_pattern=data_pattern,
                seed=seed,
            )
            results[name] = self.run_benchmark(algorithm_func, config)

        if self.results_dir is not None:
            self._generate_comparative_report(results)

        return results

    def run_regression_test(self, algorithm_func: SortFunction, algorithm_name: str,
                            baseline_file: Union[str, Path], tolerance: float = 0.1) -> Dict[str, Any]:
        """
        运行步数回归测试

        Args:
            algorithm_func: 排序函数
            algorithm_name: 算法名称
            baseline_file: 之前保存的基线结果文件
            tolerance: 比较次数允许的相对变化

        Returns:
            回归测试结果，overall_status 为 PASS 或 FAIL
        """
        baseline_result = self.load_result(baseline_file)
        current_result = self.run_benchmark(algorithm_func, baseline_result.config)

        regression_analysis = self._analyze_regression(
            algorithm_name, baseline_result, current_result, tolerance
        )

        if self.results_dir is not None:
            report_file = self.results_dir / f"regression_{algorithm_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"
            with open(report_file, 'w', encoding='utf-8') as f:
                json.dump(regression_analysis, f, indent=2, ensure_ascii=False)

        return regression_analysis

    def _measure_performance(self, algorithm_func: SortFunction, test_data: List[int],
                             algorithm_name: str, input_size: int) -> PerformanceMetrics:
        """测量一次运行的耗时和计数器"""
        # 复制数据以避免原地排序影响后续迭代
        data_copy = list(test_data)
        stats = RuntimeStats()

        start_time = time.perf_counter()
        algorithm_func(data_copy, stats)
        execution_time = time.perf_counter() - start_time

        return PerformanceMetrics(
            algorithm_name=algorithm_name,
            input_size=input_size,
            execution_time=execution_time,
            **stats.as_dict(),
        )

    def save_result(self, result: BenchmarkResult, path: Union[str, Path]) -> Path:
        """保存测试结果为 JSON"""
        result_dict = asdict(result)
        result_dict["status"] = result.status.value

        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(result_dict, f, indent=2, ensure_ascii=False)
        return path

    @staticmethod
    def load_result(path: Union[str, Path]) -> BenchmarkResult:
        """从 JSON 文件重建 BenchmarkResult"""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return BenchmarkResult(
            config=BenchmarkConfig(**data['config']),
            metrics=[PerformanceMetrics(**m) for m in data['metrics']],
            status=BenchmarkStatus(data['status']),
            start_time=data.get('start_time'),
            end_time=data.get('end_time'),
            error_message=data.get('error_message')
        )

    def _analyze_regression(self, algorithm_name: str, baseline: BenchmarkResult,
                            current: BenchmarkResult, tolerance: float) -> Dict[str, Any]:
        """比较基线和当前结果的平均比较次数"""
        baseline_summary = baseline.get_summary_statistics()
        current_summary = current.get_summary_statistics()

        regression_results = {
            "test_timestamp": datetime.now().isoformat(),
            "algorithm_name": algorithm_name,
            "tolerance": tolerance,
            "overall_status": "PASS",
            "size_comparisons": {}
        }

        for size_key, baseline_size in baseline_summary.items():
            if size_key not in current_summary:
                continue

            baseline_count = baseline_size["comparisons"]["mean"]
            current_count = current_summary[size_key]["comparisons"]["mean"]

            if baseline_count:
                change = (current_count - baseline_count) / baseline_count
            else:
                change = 0.0 if current_count == 0 else float("inf")

            size_result = {
                "baseline_comparisons": baseline_count,
                "current_comparisons": current_count,
                "change": change,
                "status": "PASS" if abs(change) <= tolerance else "FAIL"
            }

            if size_result["status"] == "FAIL":
                regression_results["overall_status"] = "FAIL"

            regression_results["size_comparisons"][size_key] = size_result

        return regression_results

    def _generate_comparative_report(self, results: Dict[str, BenchmarkResult]) -> Path:
        """生成对比报告"""
        report_file = self.results_dir / f"comparative_report_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"

        report = {
            "timestamp": datetime.now().isoformat(),
            "algorithms": list(results.keys()),
            "summary": {
                name: result.get_summary_statistics()
                for name, result in results.items()
                if result.status == BenchmarkStatus.COMPLETED
            }
        }

        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        self.logger.info("对比报告已生成: %s", report_file)
        return report_file
