"""
Command line interface for running requests against the static backend
"""

import json
import sys

import click
from tabulate import tabulate

from opensds_fake import fixtures, shares, volumes
from opensds_fake.backend import StaticBackend
from opensds_fake.config import FakeConfig
from opensds_fake.models.schemas import STATUS_FAILURE, DefaultResponse
from opensds_fake.utils.exceptions import FakeSDSException
from opensds_fake.utils.logger import configure_logging, get_logger

LOG = get_logger(__name__)


@click.group()
@click.option('--config', 'config_file', help='Configuration file path')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                case_sensitive=False),
              help='Log level')
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON')
@click.pass_context
def cli(ctx, config_file, log_level, json_logs):
    """OpenSDS fake API CLI"""
    ctx.ensure_object(dict)

    try:
        FakeConfig.load_config(config_file, force=True)
    except FakeSDSException as e:
        click.secho(f"Error loading configuration: {e}", fg='red', err=True)
        sys.exit(1)

    configure_logging(
        log_level or FakeConfig.LOG_LEVEL,
        FakeConfig.LOG_FORMAT,
        FakeConfig.JSON_LOGS or json_logs
    )


def request_options(f):
    """Options shared by every share and volume command"""
    f = click.option('--format', '-f', 'output_format',
                     type=click.Choice(['table', 'json']), default='table',
                     help='Output format')(f)
    f = click.option('--fail', 'fail_with', default=None,
                     help='Make the backend fail with this error text')(f)
    f = click.option('--request', '-r', 'request_text', default=None,
                     help='Request JSON, or @path to read it from a file '
                          '(defaults to the sample request)')(f)
    return f


def _load_request(request_cls, request_text, sample, fail_with):
    if request_text is None:
        request_text = sample
    elif request_text.startswith('@'):
        with open(request_text[1:], 'r', encoding='utf-8') as f:
            request_text = f.read()

    request = request_cls.from_json(request_text)
    request.backend = StaticBackend(fail_with=fail_with)
    return request


def _render(result, output_format):
    if isinstance(result, list):
        data = [item.to_dict() for item in result]
    else:
        data = result.to_dict()

    if output_format == 'json':
        click.echo(json.dumps(data, indent=2))
        return

    def cell(value):
        if isinstance(value, (list, dict)):
            return json.dumps(value)
        return 'N/A' if value is None else value

    if isinstance(data, list):
        if not data:
            click.echo("No resources found")
            return
        headers = list(data[0].keys())
        rows = [[cell(item.get(h)) for h in headers] for item in data]
        click.echo(tabulate(rows, headers=headers, tablefmt='grid'))
        click.echo(f"\nTotal: {len(data)}")
    else:
        rows = [[key, cell(value)] for key, value in data.items()]
        click.echo(tabulate(rows, tablefmt='grid'))


def _run(request_cls, dispatcher, request_text, sample, fail_with, output_format):
    try:
        request = _load_request(request_cls, request_text, sample, fail_with)
        LOG.debug(f"Dispatching {dispatcher.__name__} with {request.to_dict()}")
        result = dispatcher(request)
    except (OSError, UnicodeDecodeError) as e:
        click.secho(f"Error reading request: {e}", fg='red', err=True)
        sys.exit(1)
    except FakeSDSException as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)

    _render(result, output_format)

    if isinstance(result, DefaultResponse) and result.status == STATUS_FAILURE:
        sys.exit(1)


@cli.group()
def share():
    """File share operations"""


@share.command('create')
@request_options
def share_create(request_text, fail_with, output_format):
    """Create a file share"""
    _run(shares.FakeShareRequest, shares.create_share, request_text,
         fixtures.SAMPLE_SHARE_CREATE_REQUEST, fail_with, output_format)


@share.command('get')
@request_options
def share_get(request_text, fail_with, output_format):
    """Show file share details"""
    _run(shares.FakeShareRequest, shares.get_share, request_text,
         fixtures.SAMPLE_SHARE_GET_REQUEST, fail_with, output_format)


@share.command('list')
@request_options
def share_list(request_text, fail_with, output_format):
    """List all file shares"""
    _run(shares.FakeShareRequest, shares.list_shares, request_text,
         fixtures.SAMPLE_SHARE_LIST_REQUEST, fail_with, output_format)


@share.command('delete')
@request_options
def share_delete(request_text, fail_with, output_format):
    """Delete a file share"""
    _run(shares.FakeShareRequest, shares.delete_share, request_text,
         fixtures.SAMPLE_SHARE_DELETE_REQUEST, fail_with, output_format)


@cli.group()
def volume():
    """Volume operations"""


@volume.command('create')
@request_options
def volume_create(request_text, fail_with, output_format):
    """Create a volume"""
    _run(volumes.FakeVolumeRequest, volumes.create_volume, request_text,
         fixtures.SAMPLE_VOLUME_CREATE_REQUEST, fail_with, output_format)


@volume.command('get')
@request_options
def volume_get(request_text, fail_with, output_format):
    """Show volume details"""
    _run(volumes.FakeVolumeRequest, volumes.get_volume, request_text,
         fixtures.SAMPLE_VOLUME_GET_REQUEST, fail_with, output_format)


@volume.command('list')
@request_options
def volume_list(request_text, fail_with, output_format):
    """List all volumes"""
    _run(volumes.FakeVolumeRequest, volumes.list_volumes, request_text,
         fixtures.SAMPLE_VOLUME_LIST_REQUEST, fail_with, output_format)


@volume.command('delete')
@request_options
def volume_delete(request_text, fail_with, output_format):
    """Delete a volume"""
    _run(volumes.FakeVolumeRequest, volumes.delete_volume, request_text,
         fixtures.SAMPLE_VOLUME_DELETE_REQUEST, fail_with, output_format)


@volume.command('attach')
@request_options
def volume_attach(request_text, fail_with, output_format):
    """Attach a volume to a host"""
    _run(volumes.FakeVolumeRequest, volumes.attach_volume, request_text,
         fixtures.SAMPLE_VOLUME_ATTACH_REQUEST, fail_with, output_format)


@volume.command('detach')
@request_options
def volume_detach(request_text, fail_with, output_format):
    """Detach a volume attachment"""
    _run(volumes.FakeVolumeRequest, volumes.detach_volume, request_text,
         fixtures.SAMPLE_VOLUME_DETACH_REQUEST, fail_with, output_format)


@volume.command('mount')
@request_options
def volume_mount(request_text, fail_with, output_format):
    """Mount an attached volume"""
    _run(volumes.FakeVolumeRequest, volumes.mount_volume, request_text,
         fixtures.SAMPLE_VOLUME_MOUNT_REQUEST, fail_with, output_format)


@volume.command('unmount')
@request_options
def volume_unmount(request_text, fail_with, output_format):
    """Unmount a volume"""
    _run(volumes.FakeVolumeRequest, volumes.unmount_volume, request_text,
         fixtures.SAMPLE_VOLUME_UNMOUNT_REQUEST, fail_with, output_format)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
