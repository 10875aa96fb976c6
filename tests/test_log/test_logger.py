"""日志模块测试"""

import logging
import os

from statusable.config import LoggingSettings
from statusable.log import (
    DEFAULT_LOG_FORMAT,
    get_logger,
    setup_logger,
    setup_root_logger,
)


class TestGetLogger:
    """get_logger 测试"""

    def test_infer_module_name(self):
        assert get_logger().name == __name__

    def test_short_name_prefixed(self):
        assert get_logger("orm").name == "statusable.orm"

    def test_full_name_kept(self):
        assert get_logger("statusable.orm.statusable").name == "statusable.orm.statusable"
        assert get_logger("sqlalchemy.engine").name == "sqlalchemy.engine"
        assert get_logger("statusable").name == "statusable"


class TestSetupLogger:
    """setup_logger 测试"""

    def test_console_logger(self):
        logger = setup_logger("statusable.test_console", level="DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].formatter._fmt == DEFAULT_LOG_FORMAT

    def test_handlers_replaced(self):
        setup_logger("statusable.test_replace")
        logger = setup_logger("statusable.test_replace")
        assert len(logger.handlers) == 1

    def test_file_logger(self, temp_dir):
        log_file = os.path.join(temp_dir, "logs", "statusable.log")
        logger = setup_logger("statusable.test_file", log_file=log_file, console=False)
        logger.info("状态声明完成")
        for handler in logger.handlers:
            handler.flush()

        with open(log_file, encoding="utf-8") as f:
            assert "状态声明完成" in f.read()

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_root_logger_from_settings(self):
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        saved_propagate = root.propagate
        try:
            logger = setup_root_logger(config=LoggingSettings(level="WARNING", enable_console=False))
            assert logger is root
            assert logger.level == logging.WARNING
            assert logger.handlers == []
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            root.propagate = saved_propagate
