"""
日志模块单元测试
"""

import logging
import pytest
from xwidget_plus.utils.logger import (
    XwwpLogger, get_logger, setup_logging, log
)


class TestXwwpLogger:
    """XwwpLogger 测试"""

    def test_logger_creation(self):
        logger = XwwpLogger('test_module')

        assert logger.logger is logging.getLogger('test_module')

    def test_debug_log(self, capsys):
        """debug 级别日志"""
        setup_logging(level=logging.DEBUG)
        logger = XwwpLogger('test')

        logger.debug('注入 <script id=x>')

        captured = capsys.readouterr()
        assert '注入 <script id=x>' in captured.out

    def test_success_log(self, capsys):
        """success 级别日志（带 ✅ 前缀）"""
        setup_logging(level=logging.DEBUG)
        logger = XwwpLogger('test')

        logger.success('命名空间已注入')

        captured = capsys.readouterr()
        assert '✅' in captured.out
        assert 'SUCCESS' in captured.out

    def test_level_filters_debug(self, capsys):
        setup_logging(level=logging.WARNING)
        logger = XwwpLogger('test')

        logger.debug('hidden')
        logger.error('shown')

        captured = capsys.readouterr()
        assert 'hidden' not in captured.out
        assert 'shown' in captured.out


class TestEchoCallback:
    """回显回调测试"""

    def test_callback_receives_message_and_level(self):
        messages = []
        logger = XwwpLogger('test', echo_callback=lambda m, l: messages.append((m, l)))

        logger.info('hello')
        logger.warning('careful')

        assert messages == [('hello', 'info'), ('careful', 'warning')]

    def test_callback_failure_does_not_crash(self):
        def bad_callback(message, level):
            raise RuntimeError('echo error')

        logger = XwwpLogger('test', echo_callback=bad_callback)

        logger.error('still logged')

    def test_set_echo_callback(self):
        messages = []
        logger = get_logger('test')
        logger.set_echo_callback(lambda m, l: messages.append(m))

        logger.info('after')

        assert messages == ['after']


class TestSetupLogging:
    """setup_logging 测试"""

    def test_level_by_name(self, capsys):
        setup_logging(level="warning")

        logging.getLogger('test_level').info('Should not appear')
        logging.getLogger('test_level').warning('Should appear')

        captured = capsys.readouterr()
        assert 'Should not appear' not in captured.out
        assert 'Should appear' in captured.out

    def test_unknown_level_name_falls_back_to_info(self, capsys):
        setup_logging(level="chatty")

        logging.getLogger('test_level').info('info visible')

        assert 'info visible' in capsys.readouterr().out

    def test_log_file(self, tmp_path):
        log_file = tmp_path / 'logs' / 'xwwp.log'
        setup_logging(level=logging.INFO, log_file=str(log_file))

        get_logger('file_test').info('写入文件')

        assert '写入文件' in log_file.read_text(encoding='utf-8')
        setup_logging(level=logging.INFO)


class TestConvenienceLog:
    """便捷 log 函数测试"""

    def test_log_default_level(self, capsys):
        setup_logging(level=logging.INFO)

        log('Default level message')

        assert 'Default level message' in capsys.readouterr().out

    def test_unknown_level_uses_info(self, capsys):
        setup_logging(level=logging.INFO)

        log('odd level', 'verbose')

        assert 'odd level' in capsys.readouterr().out
