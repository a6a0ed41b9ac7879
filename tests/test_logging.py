import logging

from cineverse.domain.ports.services.logger import LoggerPort
from cineverse.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


class TestStdLoggerAdapter:
    def test_implements_every_port_level(self):
        """Test that the adapter is a complete LoggerPort"""
        assert isinstance(StdLoggerAdapter(), LoggerPort)
        assert not StdLoggerAdapter.__abstractmethods__

    def test_error_is_forwarded(self, caplog):
        """Test that error records reach the named standard logger"""
        # Arrange
        logger = StdLoggerAdapter("cineverse.test")

        # Act
        with caplog.at_level(logging.DEBUG, logger="cineverse.test"):
            logger.error("Catalog fetch failed for %s", "movies.json")
            logger.debug("Favorite %s %s", "1", "added")

        # Assert
        assert [(record.levelno, record.getMessage()) for record in caplog.records] == [
            (logging.ERROR, "Catalog fetch failed for movies.json"),
            (logging.DEBUG, "Favorite 1 added"),
        ]
        assert all(record.name == "cineverse.test" for record in caplog.records)
