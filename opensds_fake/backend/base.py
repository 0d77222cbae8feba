"""Backend interface consumed by the request records"""

from abc import ABC, abstractmethod

from opensds_fake.models.schemas import Response


class Backend(ABC):
    """
    Abstract backend exposing one call per resource operation.

    Every call returns an envelope with ``status``, ``error`` and
    ``message`` attributes. A generated gRPC client whose responses carry
    those fields satisfies the same contract.
    """

    @abstractmethod
    def create_share(self, resource_type: str, name: str, share_type: str,
                     share_proto: str, size: int) -> Response:
        pass

    @abstractmethod
    def get_share(self, resource_type: str, share_id: str) -> Response:
        pass

    @abstractmethod
    def list_shares(self, resource_type: str, allow_details: bool) -> Response:
        pass

    @abstractmethod
    def delete_share(self, resource_type: str, share_id: str) -> Response:
        pass

    @abstractmethod
    def create_volume(self, resource_type: str, name: str, size: int) -> Response:
        pass

    @abstractmethod
    def get_volume(self, resource_type: str, volume_id: str) -> Response:
        pass

    @abstractmethod
    def list_volumes(self, resource_type: str, allow_details: bool) -> Response:
        pass

    @abstractmethod
    def delete_volume(self, resource_type: str, volume_id: str) -> Response:
        pass

    @abstractmethod
    def attach_volume(self, resource_type: str, volume_id: str, host: str,
                      device: str) -> Response:
        pass

    @abstractmethod
    def detach_volume(self, resource_type: str, volume_id: str,
                      attachment: str) -> Response:
        pass

    @abstractmethod
    def mount_volume(self, mount_dir: str, device: str, fs_type: str) -> Response:
        pass

    @abstractmethod
    def unmount_volume(self, mount_dir: str) -> Response:
        pass
