from echobin.common.core.logging_config import setup_logging as common_setup_logging

from ..config import ServerConfig


def setup_logging(config: ServerConfig):
    """
    Load the YAML config and initialize logging for the echo server.
    """
    common_setup_logging(config.LOG_CONFIG_PATH, log_level=config.LOG_LEVEL)
