"""Response schemas package"""

from opensds_fake.models.schemas import (
    STATUS_SUCCESS,
    STATUS_FAILURE,
    Response,
    DefaultResponse,
    Link,
    ShareResponse,
    ShareDetailResponse,
    VolumeAttachment,
    VolumeResponse,
    VolumeDetailResponse,
)

__all__ = [
    'STATUS_SUCCESS',
    'STATUS_FAILURE',
    'Response',
    'DefaultResponse',
    'Link',
    'ShareResponse',
    'ShareDetailResponse',
    'VolumeAttachment',
    'VolumeResponse',
    'VolumeDetailResponse',
]
