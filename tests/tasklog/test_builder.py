"""Tests for TaskLoggerBuilder."""

import pytest

from tasklog import LoggerConfig, TaskLogger, TaskLoggerBuilder
from tests.helpers.builders import OutputConfigBuilder, make_command

pytestmark = pytest.mark.unit


class TestTaskLoggerBuilder:
    """Test the fluent builder API."""

    def test_defaults(self, sink):
        """Test a bare builder produces the default configuration."""
        logger = TaskLoggerBuilder(sink).build()
        assert isinstance(logger, TaskLogger)
        assert logger.config == LoggerConfig()
        assert logger.output_stream is sink

    def test_chaining(self, sink):
        """Test every option is applied."""
        config = (
            TaskLoggerBuilder(sink)
            .with_hide("web")
            .with_hide([0, "db"])
            .with_raw()
            .with_prefix_format("{index}")
            .with_prefix_length(15)
            .with_timestamp_format("%S")
            .with_default_color("yellow")
            .with_colors(False)
            .build_config()
        )
        assert config.hide == ("web", "0", "db")
        assert config.raw is True
        assert config.prefix_format == "{index}"
        assert config.prefix_length == 15
        assert config.timestamp_format == "%S"
        assert config.default_color == "yellow"
        assert config.colors is False

    def test_with_hide_none(self, sink):
        """Test with_hide(None) adds nothing."""
        assert TaskLoggerBuilder(sink).with_hide(None).build_config().hide == ()

    def test_with_clock(self, sink, fixed_clock):
        """Test the clock is passed to the logger."""
        logger = (
            TaskLoggerBuilder(sink)
            .with_prefix_format("time")
            .with_timestamp_format("%Y")
            .with_colors(False)
            .with_clock(fixed_clock)
            .build()
        )
        logger.log_command_text("x\n", make_command())
        assert sink.getvalue() == "[2024] x\n"

    def test_with_config(self, sink, sample_config_dict):
        """Test options are read from a configuration dictionary."""
        config = TaskLoggerBuilder(sink).with_config(sample_config_dict).build_config()
        assert config == LoggerConfig.from_config(sample_config_dict)

    def test_with_config_partial(self, sink):
        """Test only options present in the section are overridden."""
        data = OutputConfigBuilder().with_prefix_length(30).build()
        config = (
            TaskLoggerBuilder(sink)
            .with_prefix_format("pid")
            .with_config(data)
            .build_config()
        )
        assert config.prefix_format == "pid"
        assert config.prefix_length == 30

    def test_build_writes_to_sink(self, sink):
        """Test the built logger writes to the builder's sink."""
        logger = TaskLoggerBuilder(sink).with_colors(False).build()
        logger.log_global_event("hello")
        assert sink.getvalue() == "--> hello\n"
