"""Envelope and typed response schemas"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_serializer

from opensds_fake.utils.exceptions import ResponseDecodeError

STATUS_SUCCESS = 'Success'
STATUS_FAILURE = 'Failure'

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def _is_empty(value: Any) -> bool:
    return value is None or value == '' or value == [] or value == {} or value is False


class JSONSchema(BaseModel):
    """
    Base model for bodies exchanged as JSON.

    Decoding is strict: unknown keys are ignored, a value of the wrong JSON
    type is rejected, and JSON null is kept as None. A null body decodes to
    an instance with every field at its default.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True,
                              arbitrary_types_allowed=True)

    # Fields left out of to_dict() when empty
    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode='wrap')
    def drop_empty_fields(self, handler):
        data = handler(self)
        for name in self.omit_empty_fields:
            field = type(self).model_fields[name]
            for key in (name, field.alias):
                if key in data and _is_empty(data[key]):
                    del data[key]
        return data

    @classmethod
    def from_json(cls, text: str):
        result = validate_json(_adapter(Optional[cls]), text)
        return cls() if result is None else result

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


@lru_cache(maxsize=None)
def _adapter(hint) -> TypeAdapter:
    return TypeAdapter(hint)


def validate_json(adapter: TypeAdapter, text: str) -> Any:
    """Validate JSON text, raising ResponseDecodeError on any failure."""
    try:
        return adapter.validate_json(text, strict=True)
    except (TypeError, ValueError, RecursionError) as e:
        # pydantic.ValidationError is a ValueError
        raise ResponseDecodeError(f"cannot decode body: {e}") from e


def decode_list(item_cls, text: str) -> List[Any]:
    """Decode a JSON array of objects into a list of item_cls."""
    result = validate_json(_adapter(Optional[List[item_cls]]), text)
    return [] if result is None else result


@dataclass
class Response:
    """Backend response envelope"""
    status: str = ''
    error: str = ''
    message: str = ''

    @classmethod
    def success(cls, message: str = '') -> 'Response':
        return cls(status=STATUS_SUCCESS, message=message)

    @classmethod
    def failure(cls, error: str) -> 'Response':
        return cls(status=STATUS_FAILURE, error=error)


class DefaultResponse(JSONSchema):
    """Status-only response for operations without a body"""
    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({'error'})

    status: str = ''
    error: str = ''


class Link(JSONSchema):
    href: Optional[str] = None
    rel: Optional[str] = None


class ShareResponse(JSONSchema):
    id: Optional[str] = None
    links: Optional[List[Link]] = None
    name: Optional[str] = None


class ShareDetailResponse(JSONSchema):
    links: Optional[List[Link]] = None
    availability_zone: Optional[str] = None
    share_network_id: Optional[str] = None
    export_locations: Optional[List[str]] = None
    share_server_id: Optional[str] = None
    snapshot_id: Optional[str] = None
    id: Optional[str] = None
    size: Optional[int] = None
    share_type: Optional[str] = None
    share_type_name: Optional[str] = None
    export_location: Optional[str] = None
    consistency_group_id: Optional[str] = None
    project_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    status: Optional[str] = None
    description: Optional[str] = None
    host: Optional[str] = None
    access_rules_status: Optional[str] = None
    has_replicas: Optional[bool] = None
    replication_type: Optional[str] = None
    task_state: Optional[str] = None
    is_public: Optional[bool] = None
    snapshot_support: Optional[bool] = None
    name: Optional[str] = None
    created_at: Optional[str] = None
    share_proto: Optional[str] = None
    volume_type: Optional[str] = None
    source_cgsnapshot_member_id: Optional[str] = None


class VolumeAttachment(JSONSchema):
    omit_empty_fields: ClassVar[FrozenSet[str]] = frozenset({'attached_at'})

    attached_at: Optional[str] = None
    attachment_id: Optional[str] = None
    device: Optional[str] = None
    host_name: Optional[str] = None
    id: Optional[str] = None
    server_id: Optional[str] = None
    volume_id: Optional[str] = None


class VolumeResponse(JSONSchema):
    name: Optional[str] = None
    id: Optional[str] = None
    status: Optional[str] = None
    size: Optional[int] = None
    volume_type: Optional[str] = None
    attachments: Optional[List[VolumeAttachment]] = None


class VolumeDetailResponse(JSONSchema):
    id: Optional[str] = None
    attachments: Optional[List[VolumeAttachment]] = None
    links: Optional[List[Link]] = None
    metadata: Optional[Dict[str, str]] = None
    protected: Optional[bool] = None
    status: Optional[str] = None
    migration_status: Optional[str] = Field(default=None, alias='migrationStatus')
    user_id: Optional[str] = None
    encrypted: Optional[bool] = None
    multiattach: Optional[bool] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    volume_type: Optional[str] = None
    name: Optional[str] = None
    source_volid: Optional[str] = None
    snapshot_id: Optional[str] = None
    size: Optional[int] = None
    availability_zone: Optional[str] = None
    replication_status: Optional[str] = None
    consistencygroup_id: Optional[str] = None
