"""
Unit tests for response schema decoding
"""

import unittest

from opensds_fake.models import (
    DefaultResponse,
    Link,
    Response,
    ShareResponse,
    VolumeAttachment,
    VolumeDetailResponse,
)
from opensds_fake.models.schemas import decode_list
from opensds_fake.utils.exceptions import ResponseDecodeError


class TestSchemas(unittest.TestCase):
    """Test cases for JSON schema decoding"""

    def test_unknown_keys_ignored(self):
        share = ShareResponse.from_json('{"id": "a", "name": "b", "extra": 1}')
        self.assertEqual(share, ShareResponse(id='a', name='b'))

    def test_nested_objects_decoded(self):
        share = ShareResponse.from_json('{"links": [{"href": "h", "rel": "self"}]}')
        self.assertEqual(share.links, [Link(href='h', rel='self')])

    def test_renamed_key(self):
        detail = VolumeDetailResponse.from_json('{"migrationStatus": "migrating"}')
        self.assertEqual(detail.migration_status, 'migrating')
        self.assertEqual(detail.to_dict()['migrationStatus'], 'migrating')

    def test_bool_is_not_integer(self):
        with self.assertRaises(ResponseDecodeError):
            VolumeDetailResponse.from_json('{"size": true}')

    def test_nested_type_mismatch(self):
        with self.assertRaises(ResponseDecodeError):
            VolumeDetailResponse.from_json('{"metadata": {"readonly": false}}')

    def test_top_level_must_be_object(self):
        for body in ('[]', '"text"', '3'):
            with self.subTest(body=body):
                with self.assertRaises(ResponseDecodeError):
                    ShareResponse.from_json(body)

    def test_null_body_decodes_to_empty_instance(self):
        self.assertEqual(ShareResponse.from_json('null'), ShareResponse())
        detail = VolumeDetailResponse.from_json('null')
        self.assertIsNone(detail.id)
        self.assertIsNone(detail.migration_status)

    def test_integer_as_string_rejected(self):
        with self.assertRaises(ResponseDecodeError):
            VolumeDetailResponse.from_json('{"size": "2"}')

    def test_deeply_nested_body_is_decode_error(self):
        body = '[' * 100000 + ']' * 100000
        with self.assertRaises(ResponseDecodeError):
            decode_list(ShareResponse, body)
        with self.assertRaises(ResponseDecodeError):
            ShareResponse.from_json(body)

    def test_empty_message_is_decode_error(self):
        with self.assertRaises(ResponseDecodeError):
            ShareResponse.from_json('')

    def test_decode_list_null(self):
        self.assertEqual(decode_list(ShareResponse, 'null'), [])

    def test_attached_at_omitted_when_empty(self):
        self.assertNotIn('attached_at', VolumeAttachment(id='a').to_dict())

    def test_default_response_to_dict(self):
        self.assertEqual(DefaultResponse(status='Success').to_dict(), {'status': 'Success'})
        self.assertEqual(DefaultResponse(status='Failure', error='x').to_dict(),
                         {'status': 'Failure', 'error': 'x'})

    def test_envelope_constructors(self):
        self.assertEqual(Response.success('{}'), Response('Success', '', '{}'))
        self.assertEqual(Response.failure('bad'), Response('Failure', 'bad', ''))


if __name__ == '__main__':
    unittest.main()
