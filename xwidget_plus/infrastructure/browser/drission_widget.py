"""
DrissionPage widget 适配器 - 基础设施层实现

把 DrissionPage 的 ChromiumPage / ChromiumTab 包装成 ScriptWidget。

执行模型:
- 后台模式（默认）: 所有脚本放进一个 FIFO 队列，由单个守护线程按提交顺序执行，
  调用方不会阻塞；有回调时在该线程中用结果调用回调。
- 同步模式: 在调用方线程中直接执行，便于脚本化使用。

脚本出错时，回调收到异常对象；没有回调时记录错误日志
（同步模式下继续抛出）。
"""

import queue
import threading
from typing import Any, Optional, Tuple

from xwidget_plus import config
from xwidget_plus.domain.interfaces import ScriptCallback
from xwidget_plus.utils.logger import get_logger

logger = get_logger(__name__)

_Job = Tuple[str, Optional[ScriptCallback]]


class DrissionWidget:
    """
    基于 DrissionPage 标签页的 widget

    职责:
    - 在标签页中按表达式方式执行脚本（run_js(as_expr=True)）
    - 保证提交顺序即执行顺序
    - 把结果或错误交给回调
    """

    def __init__(self, tab: Any, timeout: Optional[float] = None, background: bool = True):
        """
        Args:
            tab: DrissionPage 的 tab 或 page 对象（需要 run_js 方法）
            timeout: 单个脚本超时(秒)，默认取 browser_config.js_timeout
            background: 是否在后台线程中执行
        """
        self.tab = tab
        self.timeout = config.browser_config.js_timeout if timeout is None else timeout
        self.background = background
        self._queue: "queue.Queue[Optional[_Job]]" = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._idle = threading.Condition()
        self._pending = 0
        self._closed = False

    # ============================================================
    # ScriptWidget
    # ============================================================

    def execute_script(self, source: str, callback: Optional[ScriptCallback] = None) -> None:
        """提交脚本；有回调时用结果或异常调用一次"""
        if self._closed:
            raise RuntimeError("DrissionWidget 已关闭")
        if not self.background:
            self._run(source, callback, reraise=True)
            return
        self._ensure_worker()
        with self._idle:
            self._pending += 1
        self._queue.put((source, callback))

    # ============================================================
    # 生命周期
    # ============================================================

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        等待已提交的脚本全部执行完

        Returns:
            是否在超时前执行完
        """
        if not self.background:
            return True
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout)

    def close(self):
        """停止后台线程，已提交的脚本会先执行完"""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            worker = self._worker
        if worker is not None:
            self._queue.put(None)
            worker.join()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ============================================================
    # 内部实现
    # ============================================================

    def _ensure_worker(self):
        with self._lock:
            if self._worker is None:
                self._worker = threading.Thread(
                    target=self._work, name="xwidget-plus-js", daemon=True
                )
                self._worker.start()

    def _work(self):
        while True:
            job = self._queue.get()
            if job is None:
                return
            source, callback = job
            try:
                self._run(source, callback, reraise=False)
            finally:
                with self._idle:
                    self._pending -= 1
                    self._idle.notify_all()

    def _run(self, source: str, callback: Optional[ScriptCallback], reraise: bool):
        try:
            result = self.tab.run_js(source, as_expr=True, timeout=self.timeout)
        except Exception as e:
            if callback is not None:
                self._deliver(callback, e)
                return
            logger.error(f"脚本执行失败: {e}")
            if reraise:
                raise
            return
        if callback is not None:
            self._deliver(callback, result)

    def _deliver(self, callback: ScriptCallback, value: Any):
        try:
            callback(value)
        except Exception as e:
            logger.error(f"脚本回调异常: {e}")
            if not self.background:
                raise
