# opensds_fake/__init__.py
"""
OpenSDS Fake API Layer

This library lets API tests run share and volume requests against canned
backend responses instead of a live storage orchestration service.

Key Features:
- Request records that forward each operation to a pluggable backend
- Dispatchers that check the backend envelope and decode typed responses
- A static backend answering with deterministic fixture data

Example:
    >>> from opensds_fake import FakeShareRequest, create_share
    >>> from opensds_fake.fixtures import SAMPLE_SHARE_CREATE_REQUEST
    >>>
    >>> request = FakeShareRequest.from_json(SAMPLE_SHARE_CREATE_REQUEST)
    >>> share = create_share(request)
    >>> share.name
    'My_share'
"""

from .shares import (
    ShareRequestDeliver,
    FakeShareRequest,
    create_share,
    get_share,
    list_shares,
    delete_share
)

from .volumes import (
    VolumeRequestDeliver,
    FakeVolumeRequest,
    create_volume,
    get_volume,
    list_volumes,
    delete_volume,
    attach_volume,
    detach_volume,
    mount_volume,
    unmount_volume
)

from .backend import (
    Backend,
    StaticBackend,
    get_backend,
    set_backend
)

from .models import (
    Response,
    DefaultResponse,
    ShareResponse,
    ShareDetailResponse,
    VolumeResponse,
    VolumeDetailResponse
)

from .utils.exceptions import (
    FakeSDSException,
    BackendFailureError,
    ResponseDecodeError,
    ConfigurationException
)

__version__ = '1.0.0'

__all__ = [
    # Shares
    'ShareRequestDeliver',
    'FakeShareRequest',
    'create_share',
    'get_share',
    'list_shares',
    'delete_share',

    # Volumes
    'VolumeRequestDeliver',
    'FakeVolumeRequest',
    'create_volume',
    'get_volume',
    'list_volumes',
    'delete_volume',
    'attach_volume',
    'detach_volume',
    'mount_volume',
    'unmount_volume',

    # Backend
    'Backend',
    'StaticBackend',
    'get_backend',
    'set_backend',

    # Responses
    'Response',
    'DefaultResponse',
    'ShareResponse',
    'ShareDetailResponse',
    'VolumeResponse',
    'VolumeDetailResponse',

    # Exceptions
    'FakeSDSException',
    'BackendFailureError',
    'ResponseDecodeError',
    'ConfigurationException',

    # Version
    '__version__',
]
