import socket


class PortChecker:
    @staticmethod
    def is_port_open(port: int, host: str = '127.0.0.1', timeout: float = 0.5) -> bool:
        """用 socket 探测 Chromium 调试端口是否在监听"""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.settimeout(timeout)
            return s.connect_ex((host, port)) == 0

    @staticmethod
    def split_addr(addr: str) -> tuple:
        """'127.0.0.1:9222' -> ('127.0.0.1', 9222)"""
        host, _, port = addr.rpartition(':')
        return host or '127.0.0.1', int(port)
