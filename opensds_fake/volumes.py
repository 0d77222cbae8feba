"""
Entry into the CRUD operations of volumes.

Besides create/get/list/delete, volumes support attach, detach, mount and
unmount; those return a DefaultResponse instead of a decoded body.
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
    VolumeDetailResponse,
    VolumeResponse,
    decode_list,
)


class VolumeRequestDeliver(ABC):
    """Operations a request must implement to be dispatched as a volume"""

    @abstractmethod
    def create_volume(self) -> Response:
        pass

    @abstractmethod
    def get_volume(self) -> Response:
        pass

    @abstractmethod
    def list_volumes(self) -> Response:
        pass

    @abstractmethod
    def delete_volume(self) -> Response:
        pass

    @abstractmethod
    def attach_volume(self) -> Response:
        pass

    @abstractmethod
    def detach_volume(self) -> Response:
        pass

    @abstractmethod
    def mount_volume(self) -> Response:
        pass

    @abstractmethod
    def unmount_volume(self) -> Response:
        pass


class FakeVolumeRequest(JSONSchema, VolumeRequestDeliver):
    """Volume request record, built from keywords or camelCase JSON"""
    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({
        'resource_type', 'id', 'name', 'action_type', 'host', 'device',
        'attachment', 'mount_dir', 'fs_type'
    })

    resource_type: str = Field(default='', alias='resourceType')
    id: str = ''
    name: str = ''
    size: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    allow_details: bool = Field(default=False, alias='allowDetails')

    action_type: str = Field(default='', alias='actionType')
    host: str = ''
    device: str = ''
    attachment: str = ''
    mount_dir: str = Field(default='', alias='mountDir')
    fs_type: str = Field(default='', alias='fsType')

    backend: Optional[Backend] = Field(default=None, exclude=True, repr=False)

    def _backend(self) -> Backend:
        return self.backend or get_backend()

    def _resource_type(self) -> str:
        return self.resource_type or FakeConfig.get_config()['volume_resource_type']

    def create_volume(self) -> Response:
        return self._backend().create_volume(self._resource_type(), self.name, self.size)

    def get_volume(self) -> Response:
        return self._backend().get_volume(self._resource_type(), self.id)

    def list_volumes(self) -> Response:
        return self._backend().list_volumes(self._resource_type(), self.allow_details)

    def delete_volume(self) -> Response:
        return self._backend().delete_volume(self._resource_type(), self.id)

    def attach_volume(self) -> Response:
        return self._backend().attach_volume(
            self._resource_type(), self.id, self.host, self.device
        )

    def detach_volume(self) -> Response:
        return self._backend().detach_volume(
            self._resource_type(), self.id, self.attachment
        )

    def mount_volume(self) -> Response:
        return self._backend().mount_volume(self.mount_dir, self.device, self.fs_type)

    def unmount_volume(self) -> Response:
        return self._backend().unmount_volume(self.mount_dir)


def create_volume(vrd: VolumeRequestDeliver) -> VolumeResponse:
    return decode_result(vrd.create_volume(), "Create volume error:",
                         VolumeResponse.from_json)


def get_volume(vrd: VolumeRequestDeliver) -> VolumeDetailResponse:
    return decode_result(vrd.get_volume(), "Get volume error:",
                         VolumeDetailResponse.from_json)


def list_volumes(vrd: VolumeRequestDeliver) -> List[VolumeResponse]:
    return decode_result(vrd.list_volumes(), "List all volumes error:",
                         lambda text: decode_list(VolumeResponse, text))


def delete_volume(vrd: VolumeRequestDeliver) -> DefaultResponse:
    return default_result(vrd.delete_volume(), "Delete volume error:")


def attach_volume(vrd: VolumeRequestDeliver) -> DefaultResponse:
    return default_result(vrd.attach_volume(), "Attach volume error:")


def detach_volume(vrd: VolumeRequestDeliver) -> DefaultResponse:
    return default_result(vrd.detach_volume(), "Detach volume error:")


def mount_volume(vrd: VolumeRequestDeliver) -> DefaultResponse:
    return default_result(vrd.mount_volume(), "Mount volume error:")


def unmount_volume(vrd: VolumeRequestDeliver) -> DefaultResponse:
    return default_result(vrd.unmount_volume(), "Unmount volume error:")
