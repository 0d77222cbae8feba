"""
Unit tests for the volume request record and dispatchers
"""

import json
import unittest
from unittest.mock import Mock

from opensds_fake import fixtures
from opensds_fake.backend import StaticBackend
from opensds_fake.models import DefaultResponse, Response, VolumeDetailResponse
from opensds_fake.utils.exceptions import BackendFailureError, ResponseDecodeError
from opensds_fake.volumes import (
    FakeVolumeRequest,
    VolumeRequestDeliver,
    attach_volume,
    create_volume,
    delete_volume,
    detach_volume,
    get_volume,
    list_volumes,
    mount_volume,
    unmount_volume,
)

VOLUME_ID = 'f5fc9874-fc89-4814-a358-23ba83a6115f'

BODYLESS_OPERATIONS = [
    ('delete_volume', delete_volume, 'Delete volume error:'),
    ('attach_volume', attach_volume, 'Attach volume error:'),
    ('detach_volume', detach_volume, 'Detach volume error:'),
    ('mount_volume', mount_volume, 'Mount volume error:'),
    ('unmount_volume', unmount_volume, 'Unmount volume error:'),
]


def deliver(**responses):
    """Build a VolumeRequestDeliver whose methods return the given envelopes"""
    vrd = Mock(spec=VolumeRequestDeliver)
    for method, response in responses.items():
        getattr(vrd, method).return_value = response
    return vrd


class TestVolumeDispatch(unittest.TestCase):
    """Test cases for the volume dispatchers"""

    def test_create_volume(self):
        vrd = deliver(create_volume=Response.success(fixtures.SAMPLE_VOLUME_DATA))

        volume = create_volume(vrd)

        self.assertEqual(volume.id, VOLUME_ID)
        self.assertEqual(volume.name, 'myvol1')
        self.assertEqual(volume.size, 2)
        self.assertEqual(volume.attachments, [])
        self.assertEqual(volume.to_dict(), json.loads(fixtures.SAMPLE_VOLUME_DATA))

    def test_create_volume_failure(self):
        vrd = deliver(create_volume=Response.failure('no space left'))

        with self.assertLogs('opensds_fake.dispatch', level='ERROR') as logs:
            with self.assertRaises(BackendFailureError) as ctx:
                create_volume(vrd)

        self.assertEqual(ctx.exception.error, 'no space left')
        self.assertIn('Create volume error: no space left', logs.output[0])

    def test_create_volume_malformed_body(self):
        vrd = deliver(create_volume=Response.success('not json at all'))
        with self.assertLogs('opensds_fake.dispatch', level='ERROR') as logs:
            with self.assertRaises(ResponseDecodeError):
                create_volume(vrd)
        self.assertIn('Create volume error:', logs.output[0])

    def test_create_volume_rejects_string_size(self):
        vrd = deliver(create_volume=Response.success('{"id": "x", "size": "2"}'))
        with self.assertRaises(ResponseDecodeError):
            create_volume(vrd)

    def test_get_volume(self):
        vrd = deliver(get_volume=Response.success(fixtures.SAMPLE_VOLUME_DETAIL_DATA))

        detail = get_volume(vrd)

        self.assertEqual(detail.id, '30becf77-63fe-4f5e-9507-a0578ffe0949')
        self.assertEqual(detail.name, 'test_volume')
        self.assertIsNone(detail.migration_status)
        self.assertEqual(detail.attachments[0].host_name, 'host_test')
        self.assertIsNone(detail.attachments[0].attached_at)
        self.assertEqual(detail.metadata['attached_mode'], 'rw')
        self.assertEqual(detail.to_dict(), json.loads(fixtures.SAMPLE_VOLUME_DETAIL_DATA))

    def test_get_volume_null_body(self):
        detail = get_volume(deliver(get_volume=Response.success('null')))
        self.assertEqual(detail, VolumeDetailResponse())
        self.assertIsNone(detail.attachments)

    def test_get_volume_failure(self):
        vrd = deliver(get_volume=Response.failure('not found'))
        with self.assertLogs('opensds_fake.dispatch', level='ERROR') as logs:
            with self.assertRaises(BackendFailureError):
                get_volume(vrd)
        self.assertIn('Get volume error: not found', logs.output[0])

    def test_list_volumes(self):
        vrd = deliver(list_volumes=Response.success(fixtures.SAMPLE_VOLUMES_DATA))

        result = list_volumes(vrd)

        self.assertEqual([v.name for v in result], ['myvol1', 'myvol2'])
        self.assertEqual(result[0].attachments[0].attached_at, '2017-02-11T14:08:17.000000')
        self.assertEqual(result[0].attachments[0].server_id, '')
        self.assertEqual([v.to_dict() for v in result],
                         json.loads(fixtures.SAMPLE_VOLUMES_DATA))

    def test_list_volumes_failure(self):
        vrd = deliver(list_volumes=Response.failure('timeout'))
        with self.assertLogs('opensds_fake.dispatch', level='ERROR') as logs:
            with self.assertRaises(BackendFailureError):
                list_volumes(vrd)
        self.assertIn('List all volumes error: timeout', logs.output[0])

    def test_list_volumes_bad_item(self):
        vrd = deliver(list_volumes=Response.success('[{"id": "a"}, "b"]'))
        with self.assertRaises(ResponseDecodeError):
            list_volumes(vrd)

    def test_delete_volume_not_found(self):
        """Failure envelope on delete gives a Failure default response"""
        vrd = deliver(delete_volume=Response.failure('not found'))

        result = delete_volume(vrd)

        self.assertEqual(result.status, 'Failure')
        self.assertEqual(result.error, 'not found')

    def test_bodyless_operations_success(self):
        for method, dispatcher, _ in BODYLESS_OPERATIONS:
            with self.subTest(operation=method):
                vrd = deliver(**{method: Response.success()})
                self.assertEqual(dispatcher(vrd), DefaultResponse(status='Success'))
                getattr(vrd, method).assert_called_once_with()

    def test_bodyless_operations_failure(self):
        for method, dispatcher, prefix in BODYLESS_OPERATIONS:
            with self.subTest(operation=method):
                vrd = deliver(**{method: Response.failure('device busy')})

                with self.assertLogs('opensds_fake.dispatch', level='ERROR') as logs:
                    result = dispatcher(vrd)

                self.assertEqual(result, DefaultResponse(status='Failure', error='device busy'))
                self.assertIn(f'{prefix} device busy', logs.output[0])


class TestFakeVolumeRequest(unittest.TestCase):
    """Test cases for FakeVolumeRequest"""

    def setUp(self):
        self.backend = StaticBackend()

    def _request(self, sample):
        request = FakeVolumeRequest.from_json(sample)
        request.backend = self.backend
        return request

    def test_create_field_extraction(self):
        create_volume(self._request(fixtures.SAMPLE_VOLUME_CREATE_REQUEST))
        self.assertEqual(self.backend.calls, [
            ('create_volume', {'resource_type': 'cinder', 'name': 'myvol1', 'size': 2})
        ])

    def test_get_list_delete_field_extraction(self):
        get_volume(self._request(fixtures.SAMPLE_VOLUME_GET_REQUEST))
        list_volumes(self._request(fixtures.SAMPLE_VOLUME_LIST_REQUEST))
        delete_volume(self._request(fixtures.SAMPLE_VOLUME_DELETE_REQUEST))

        self.assertEqual(self.backend.calls, [
            ('get_volume', {'resource_type': 'cinder',
                            'volume_id': '30becf77-63fe-4f5e-9507-a0578ffe0949'}),
            ('list_volumes', {'resource_type': 'cinder', 'allow_details': False}),
            ('delete_volume', {'resource_type': 'cinder', 'volume_id': VOLUME_ID}),
        ])

    def test_attach_detach_field_extraction(self):
        attach_volume(self._request(fixtures.SAMPLE_VOLUME_ATTACH_REQUEST))
        detach_volume(self._request(fixtures.SAMPLE_VOLUME_DETACH_REQUEST))

        self.assertEqual(self.backend.calls, [
            ('attach_volume', {'resource_type': 'cinder', 'volume_id': VOLUME_ID,
                               'host': 'localhost', 'device': '/dev/vdc'}),
            ('detach_volume', {'resource_type': 'cinder', 'volume_id': VOLUME_ID,
                               'attachment': 'ddb2ac07-ed62-49eb-93da-73b258dd9bec'}),
        ])

    def test_mount_unmount_field_extraction(self):
        mount_volume(self._request(fixtures.SAMPLE_VOLUME_MOUNT_REQUEST))
        unmount_volume(self._request(fixtures.SAMPLE_VOLUME_UNMOUNT_REQUEST))

        self.assertEqual(self.backend.calls, [
            ('mount_volume', {'mount_dir': '/mnt', 'device': '/dev/vdc', 'fs_type': 'ext4'}),
            ('unmount_volume', {'mount_dir': '/mnt'}),
        ])

    def test_static_backend_failure(self):
        self.backend.fail_with = 'not found'
        result = delete_volume(self._request(fixtures.SAMPLE_VOLUME_DELETE_REQUEST))
        self.assertEqual(result, DefaultResponse(status='Failure', error='not found'))

    def test_size_bounded_to_int32(self):
        self.assertEqual(FakeVolumeRequest.from_json('{"size": 2147483647}').size, 2147483647)
        with self.assertRaises(ResponseDecodeError):
            FakeVolumeRequest.from_json('{"name": "myvol1", "size": 2147483648}')

    def test_to_dict_round_trip_keys(self):
        request = FakeVolumeRequest.from_json(fixtures.SAMPLE_VOLUME_MOUNT_REQUEST)
        self.assertEqual(request.to_dict(), {
            'id': VOLUME_ID,
            'size': 0,
            'allowDetails': False,
            'device': '/dev/vdc',
            'mountDir': '/mnt',
            'fsType': 'ext4',
        })


if __name__ == '__main__':
    unittest.main()
