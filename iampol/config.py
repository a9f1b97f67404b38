"""
Figure out which AWS partition policies should be written for.

Nothing in the builders reads this on its own; pass partition=get_partition()
if you want it.
"""
import os

import pulumi

__all__ = 'NoRegionError', 'get_region', 'get_partition'


class NoRegionError(Exception):
    """
    Raised if we aren't able to detect the current region
    """


# Region prefix -> partition. Anything else is plain 'aws'.
PARTITIONS = {
    'cn-': 'aws-cn',
    'us-gov-': 'aws-us-gov',
    'us-iso-': 'aws-iso',
    'us-isob-': 'aws-iso-b',
}


def get_region():
    """
    Gets the configured AWS region.
    """
    config = pulumi.Config("aws").get('region')
    # Same order pulumi-aws uses
    if config:
        return config
    elif 'AWS_REGION' in os.environ:
        return os.environ['AWS_REGION']
    elif 'AWS_DEFAULT_REGION' in os.environ:
        return os.environ['AWS_DEFAULT_REGION']
    else:
        raise NoRegionError("Unable to determine AWS Region")


def partition_for_region(region):
    # Longest prefix wins, so us-isob- isn't read as us-iso-
    for prefix in sorted(PARTITIONS, key=len, reverse=True):
        if region.startswith(prefix):
            return PARTITIONS[prefix]
    return 'aws'


def get_partition():
    """
    Gets the AWS partition ('aws', 'aws-cn', ...) to use in ARNs.

    Explicit config wins, then $AWS_PARTITION, then whatever the region implies.
    """
    config = pulumi.Config("iampol").get('partition')
    if config:
        return config
    elif os.environ.get('AWS_PARTITION'):
        return os.environ['AWS_PARTITION']

    try:
        region = get_region()
    except NoRegionError:
        pulumi.info("No AWS region configured, assuming the 'aws' partition")
        return 'aws'
    else:
        partition = partition_for_region(region)
        pulumi.debug(f"Region {region} is in partition {partition}")
        return partition
