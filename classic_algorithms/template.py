"""
算法基础模板模块

为排序和图遍历算法提供统一的执行流程：输入验证、日志记录和执行耗时统计。
具体算法只需实现 _execute_core，必要时重写 _validate_inputs。
"""

import logging
import time
from abc import abstractmethod
from typing import Any, Dict

from .base import Algorithm


class ProductionAlgorithm(Algorithm):
    """
    生产级算法基础类

    提供标准的错误处理、日志记录、性能监控等功能。
    算法抛出的异常会被记录后原样向上传播，不做包装也不做重试。
    """

    def __init__(self, enable_logging: bool = True, enable_metrics: bool = True):
        """
        初始化生产级算法

        Args:
            enable_logging: 是否启用日志记录
            enable_metrics: 是否启用性能指标收集
        """
        self.enable_logging = enable_logging
        self.enable_metrics = enable_metrics
        self.logger = logging.getLogger(self.__class__.__name__) if enable_logging else None
        self._execution_count = 0
        self._total_execution_time = 0.0

    def execute(self, *args, **kwargs) -> Any:
        """
        执行算法（带监控和错误处理）

        Returns:
            算法执行结果

        Raises:
            AlgorithmError: 由具体算法抛出的领域异常
        """
        start_time = time.perf_counter()

        try:
            self._validate_inputs(*args, **kwargs)

            if self.logger:
                self.logger.debug("开始执行算法 %s", self.__class__.__name__)

            result = self._execute_core(*args, **kwargs)

            execution_time = time.perf_counter() - start_time

            if self.enable_metrics:
                self._update_metrics(execution_time)

            if self.logger:
                self.logger.debug("算法执行成功，耗时: %.4fs", execution_time)

            return result

        except Exception as e:
            execution_time = time.perf_counter() - start_time

            if self.logger:
                self.logger.error("算法 %s 执行失败: %s, 耗时: %.4fs",
                                  self.__class__.__name__, e, execution_time)
            raise

    @abstractmethod
    def _execute_core(self, *args, **kwargs) -> Any:
        """
        核心算法逻辑实现

        子类必须实现此方法
        """

    def _validate_inputs(self, *args, **kwargs) -> None:
        """
        输入参数验证

        子类可以重写此方法实现自定义验证逻辑
        """

    def _update_metrics(self, execution_time: float) -> None:
        """更新性能指标"""
        self._execution_count += 1
        self._total_execution_time += execution_time

    def get_performance_stats(self) -> Dict[str, Any]:
        """
        获取性能统计信息

        Returns:
            性能统计字典
        """
        if self._execution_count == 0:
            return {"execution_count": 0}

        return {
            "execution_count": self._execution_count,
            "total_execution_time": self._total_execution_time,
            "average_execution_time": self._total_execution_time / self._execution_count,
            "algorithm_name": self.__class__.__name__
        }
