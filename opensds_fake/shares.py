"""
Entry into the CRUD operations of file shares.

A share request record forwards each operation to the backend; the module
level functions check the returned envelope and decode its body.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field

from opensds_fake.backend import Backend, get_backend
from opensds_fake.config import FakeConfig
from opensds_fake.dispatch import decode_result, default_result
from opensds_fake.models.schemas import (
    DefaultResponse,
    INT32_MAX,
    INT32_MIN,
    JSONSchema,
    Response,
    ShareDetailResponse,
    ShareResponse,
    decode_list,
)


class ShareRequestDeliver(ABC):
    """Operations a request must implement to be dispatched as a share"""

    @abstractmethod
    def create_share(self) -> Response:
        pass

    @abstractmethod
    def get_share(self) -> Response:
        pass

    @abstractmethod
    def list_shares(self) -> Response:
        pass

    @abstractmethod
    def delete_share(self) -> Response:
        pass


class FakeShareRequest(JSONSchema, ShareRequestDeliver):
    """Share request record, built from keywords or camelCase JSON"""
    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({
        'resource_type', 'id', 'name', 'share_type', 'share_proto'
    })

    resource_type: str = Field(default='', alias='resourceType')
    id: str = ''
    name: str = ''
    size: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    share_type: str = Field(default='', alias='shareType')
    share_proto: str = Field(default='', alias='shareProto')
    allow_details: bool = Field(default=False, alias='allowDetails')

    backend: Optional[Backend] = Field(default=None, exclude=True, repr=False)

    def _backend(self) -> Backend:
        return self.backend or get_backend()

    def _resource_type(self) -> str:
        return self.resource_type or FakeConfig.get_config()['share_resource_type']

    def create_share(self) -> Response:
        return self._backend().create_share(
            self._resource_type(), self.name, self.share_type,
            self.share_proto, self.size
        )

    def get_share(self) -> Response:
        return self._backend().get_share(self._resource_type(), self.id)

    def list_shares(self) -> Response:
        return self._backend().list_shares(self._resource_type(), self.allow_details)

    def delete_share(self) -> Response:
        return self._backend().delete_share(self._resource_type(), self.id)


def create_share(srd: ShareRequestDeliver) -> ShareResponse:
    return decode_result(srd.create_share(), "Create file share error:",
                         ShareResponse.from_json)


def get_share(srd: ShareRequestDeliver) -> ShareDetailResponse:
    return decode_result(srd.get_share(), "Get file share error:",
                         ShareDetailResponse.from_json)


def list_shares(srd: ShareRequestDeliver) -> List[ShareResponse]:
    return decode_result(srd.list_shares(), "List all file shares error:",
                         lambda text: decode_list(ShareResponse, text))


def delete_share(srd: ShareRequestDeliver) -> DefaultResponse:
    return default_result(srd.delete_share(), "Delete file share error:")
