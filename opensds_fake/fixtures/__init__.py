"""Canned request and response fixtures"""

from opensds_fake.fixtures.shares import *
from opensds_fake.fixtures.volumes import *
