import pytest

from iampol.config import NoRegionError, get_region, get_partition, partition_for_region


def test_region_from_stack_config(stack_config, monkeypatch):
    stack_config['aws:region'] = 'eu-west-1'
    monkeypatch.setenv('AWS_REGION', 'us-east-1')
    assert get_region() == 'eu-west-1'


def test_region_from_environment(stack_config, monkeypatch):
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-west-2')
    assert get_region() == 'us-west-2'
    monkeypatch.setenv('AWS_REGION', 'us-east-1')
    assert get_region() == 'us-east-1'


def test_no_region(stack_config):
    with pytest.raises(NoRegionError):
        get_region()


@pytest.mark.parametrize("region, partition", [
    ('us-east-1', 'aws'),
    ('ap-southeast-2', 'aws'),
    ('cn-north-1', 'aws-cn'),
    ('us-gov-west-1', 'aws-us-gov'),
    ('us-iso-east-1', 'aws-iso'),
    ('us-isob-east-1', 'aws-iso-b'),
])
def test_partition_for_region(region, partition):
    assert partition_for_region(region) == partition


def test_partition_from_stack_config(stack_config, monkeypatch):
    stack_config['iampol:partition'] = 'aws-us-gov'
    monkeypatch.setenv('AWS_PARTITION', 'aws-cn')
    assert get_partition() == 'aws-us-gov'


def test_partition_from_environment(stack_config, monkeypatch):
    monkeypatch.setenv('AWS_PARTITION', 'aws-cn')
    monkeypatch.setenv('AWS_REGION', 'us-east-1')
    assert get_partition() == 'aws-cn'


def test_partition_from_region(stack_config, monkeypatch):
    monkeypatch.setenv('AWS_REGION', 'cn-northwest-1')
    assert get_partition() == 'aws-cn'


def test_partition_default(stack_config):
    assert get_partition() == 'aws'


def test_config_not_exported_from_package_root():
    import iampol

    for name in ('get_region', 'get_partition', 'NoRegionError'):
        assert name not in iampol.__all__
        assert not hasattr(iampol, name)
