import unittest

import mock

from macfe80.common import logger

_CFG_WITH_LOGGING = "logging_config:\n  version: 1\n  root:\n    level: WARNING\n"


class LoggerTest(unittest.TestCase):
    @mock.patch.object(logger.os.path, "isfile", autospec=True, return_value=False)
    def test_fetch_logging_configuration_default(self, isfile_mock):
        """Verify the default configuration is used without a config file."""
        self.assertIs(
            logger._LOGGING_DEFAULT_CONFIG, logger.fetch_logging_configuration()
        )

    @mock.patch.object(logger.os.path, "isfile", autospec=True, return_value=True)
    def test_fetch_logging_configuration_from_file(self, isfile_mock):
        """Verify logging_config is read from the config file."""
        mock_open = mock.mock_open(read_data=_CFG_WITH_LOGGING)
        with mock.patch("builtins.open", mock_open):
            self.assertDictEqual(
                {"version": 1, "root": {"level": "WARNING"}},
                logger.fetch_logging_configuration(),
            )

    @mock.patch.object(logger.os.path, "isfile", autospec=True, return_value=True)
    def test_fetch_logging_configuration_without_key(self, isfile_mock):
        """Verify a config file without logging_config falls back to the default."""
        mock_open = mock.mock_open(read_data="ipv6_default: true\n")
        with mock.patch("builtins.open", mock_open):
            self.assertIs(
                logger._LOGGING_DEFAULT_CONFIG, logger.fetch_logging_configuration()
            )


if __name__ == "__main__":
    unittest.main()
