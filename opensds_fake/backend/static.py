"""Backend that answers every call with the canned fixture bodies"""

from typing import Any, Dict, List, Optional, Tuple

from opensds_fake import fixtures
from opensds_fake.backend.base import Backend
from opensds_fake.models.schemas import Response
from opensds_fake.utils.logger import get_logger

LOG = get_logger(__name__)


class StaticBackend(Backend):
    """
    Deterministic backend for tests.

    With ``fail_with`` set every call returns a failure envelope carrying
    that text. Calls are recorded in ``calls`` as ``(operation, kwargs)``.
    """

    def __init__(self, fail_with: Optional[str] = None):
        self.fail_with = fail_with
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def _respond(self, operation: str, message: str = '', **kwargs) -> Response:
        self.calls.append((operation, kwargs))
        LOG.debug(f"{operation} called with {kwargs}")

        if self.fail_with is not None:
            return Response.failure(self.fail_with)
        return Response.success(message)

    def create_share(self, resource_type, name, share_type, share_proto, size):
        return self._respond('create_share', fixtures.SAMPLE_SHARE_DATA,
                             resource_type=resource_type, name=name,
                             share_type=share_type, share_proto=share_proto,
                             size=size)

    def get_share(self, resource_type, share_id):
        return self._respond('get_share', fixtures.SAMPLE_SHARE_DETAIL_DATA,
                             resource_type=resource_type, share_id=share_id)

    def list_shares(self, resource_type, allow_details):
        return self._respond('list_shares', fixtures.SAMPLE_SHARES_DATA,
                             resource_type=resource_type,
                             allow_details=allow_details)

    def delete_share(self, resource_type, share_id):
        return self._respond('delete_share', resource_type=resource_type,
                             share_id=share_id)

    def create_volume(self, resource_type, name, size):
        return self._respond('create_volume', fixtures.SAMPLE_VOLUME_DATA,
                             resource_type=resource_type, name=name, size=size)

    def get_volume(self, resource_type, volume_id):
        return self._respond('get_volume', fixtures.SAMPLE_VOLUME_DETAIL_DATA,
                             resource_type=resource_type, volume_id=volume_id)

    def list_volumes(self, resource_type, allow_details):
        return self._respond('list_volumes', fixtures.SAMPLE_VOLUMES_DATA,
                             resource_type=resource_type,
                             allow_details=allow_details)

    def delete_volume(self, resource_type, volume_id):
        return self._respond('delete_volume', resource_type=resource_type,
                             volume_id=volume_id)

    def attach_volume(self, resource_type, volume_id, host, device):
        return self._respond('attach_volume', resource_type=resource_type,
                             volume_id=volume_id, host=host, device=device)

    def detach_volume(self, resource_type, volume_id, attachment):
        return self._respond('detach_volume', resource_type=resource_type,
                             volume_id=volume_id, attachment=attachment)

    def mount_volume(self, mount_dir, device, fs_type):
        return self._respond('mount_volume', mount_dir=mount_dir,
                             device=device, fs_type=fs_type)

    def unmount_volume(self, mount_dir):
        return self._respond('unmount_volume', mount_dir=mount_dir)
