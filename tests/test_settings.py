import logging

from milvus_response.settings import COLORS, ColorfulFormatter, Config, init_log


class TestSettings:
    def test_defaults(self):
        assert Config.EncodeProtocol == "utf-8"
        assert Config.JSON_LOG_PREVIEW > 0
        assert Config.LOG_LEVEL == Config.LOG_LEVEL.upper()

    def test_init_log(self):
        init_log("DEBUG")
        try:
            assert logging.getLogger("milvus_response").level == logging.DEBUG
        finally:
            init_log(Config.LOG_LEVEL)

    def test_colorful_formatter(self):
        record = logging.LogRecord("milvus_response", logging.ERROR, __file__, 1, "oops", None, None)
        message = ColorfulFormatter("%(message)s").format(record)
        assert message == COLORS["ERROR"] + "oops" + COLORS["ENDC"]
