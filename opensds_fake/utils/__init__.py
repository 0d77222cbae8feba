"""Utilities package"""

from opensds_fake.utils.logger import get_logger, configure_logging
from opensds_fake.utils.exceptions import *

__all__ = ['get_logger', 'configure_logging']
