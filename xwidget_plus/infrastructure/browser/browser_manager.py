"""
浏览器管理器 - 基础设施层实现

封装 DrissionPage 的浏览器连接和标签页管理，为标签页创建 DrissionWidget。
"""

from typing import Any, Dict, List, Optional

from DrissionPage import ChromiumPage

from xwidget_plus import config
from xwidget_plus.domain.errors import WidgetConnectionError
from xwidget_plus.utils.logger import get_logger
from xwidget_plus.utils.port_check import PortChecker

from .drission_widget import DrissionWidget

logger = get_logger(__name__)


class BrowserManager:
    """
    浏览器管理器

    职责:
    - 连接已开启调试端口的 Chromium
    - 列出标签页
    - 为标签页提供 widget
    """

    def __init__(self, addr: Optional[str] = None):
        """
        Args:
            addr: 浏览器调试地址，默认取 browser_config.addr
        """
        self.addr = addr or config.browser_config.addr
        self.page: Optional[ChromiumPage] = None

    def connect(self) -> ChromiumPage:
        """
        连接浏览器

        Raises:
            WidgetConnectionError: 调试端口未开启
        """
        host, port = PortChecker.split_addr(self.addr)
        if not PortChecker.is_port_open(port, host, config.browser_config.port_probe_timeout):
            raise WidgetConnectionError(f"无法连接到 {self.addr}，请确认浏览器已开启远程调试")

        self.page = ChromiumPage(addr_or_opts=self.addr)
        logger.info(f"已连接浏览器 {self.addr}")
        return self.page

    def is_connected(self) -> bool:
        return self.page is not None

    def _require_page(self) -> ChromiumPage:
        if self.page is None:
            self.connect()
        return self.page

    def get_tabs(self) -> List[Dict[str, Any]]:
        """
        获取所有打开的标签页

        Returns:
            [{"id", "title", "url"}, ...]
        """
        page = self._require_page()
        tabs = []
        for tab_id in page.tab_ids:
            tab = page.get_tab(tab_id)
            tabs.append({
                "id": tab_id,
                "title": tab.title or "",
                "url": tab.url,
            })
        return tabs

    def get_widget(self, tab_id: Optional[str] = None, **widget_options) -> DrissionWidget:
        """
        获取标签页对应的 widget

        Args:
            tab_id: 标签页 ID，省略时使用当前页
            **widget_options: 传给 DrissionWidget 的参数（timeout, background）
        """
        page = self._require_page()
        tab = page.get_tab(tab_id) if tab_id else page
        return DrissionWidget(tab, **widget_options)
