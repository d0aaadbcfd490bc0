# Common utilities
from offlic.common.config import Config as Config
from offlic.common.crypto import CryptoUtils as CryptoUtils
from offlic.common.logging_utils import get_logger as get_logger
from offlic.common.logging_utils import setup_logger as setup_logger

__all__ = ["Config", "CryptoUtils", "get_logger", "setup_logger"]
