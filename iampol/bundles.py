"""
Fixed policy bundles.

The action lists here come from what AWS says EMR needs, not from anything we
work out, so they're kept as plain data. Update the tables, not the builders.
"""
import pulumi

from .policy import (
    Policy, allow_read_path, allow_service_full_access, allow_service_specific_action,
)
from .utils import statement, render

__all__ = (
    'CLUSTER_BOOTSTRAP_ACTIONS', 'CLUSTER_BOOTSTRAP_POLICY_NAME', 'BOOTSTRAP_BUCKET',
    'BOOTSTRAP_REGION', 'allow_cluster_bootstrap_access', 'EC2_FULL_ACCESS',
    'EC2_DESCRIBE_TAGS',
)

CLUSTER_BOOTSTRAP_POLICY_NAME = "emr-full-access"

CLUSTER_BOOTSTRAP_ACTIONS = (
    "elasticmapreduce:*",
    "ec2:AuthorizeSecurityGroupIngress",
    "ec2:CancelSpotInstanceRequests",
    "ec2:CreateSecurityGroup",
    "ec2:CreateTags",
    "ec2:DescribeAvailabilityZones",
    "ec2:DescribeInstances",
    "ec2:DescribeKeyPairs",
    "ec2:DescribeRouteTables",
    "ec2:DescribeSecurityGroups",
    "ec2:DescribeSpotInstanceRequests",
    "ec2:DescribeSubnets",
    "ec2:ModifyImageAttribute",
    "ec2:ModifyInstanceAttribute",
    "ec2:RequestSpotInstances",
    "ec2:RunInstances",
    "ec2:TerminateInstances",
    "cloudwatch:*",
    "sdb:*",
)

# Holds the standard EMR bootstrap actions and steps
BOOTSTRAP_BUCKET = "elasticmapreduce"
BOOTSTRAP_REGION = "ap-southeast-2"


def allow_cluster_bootstrap_access(*, region=BOOTSTRAP_REGION, partition='aws'):
    """
    Policies for running EMR clusters: full access to EMR (and the bits of EC2
    it drives), plus read access to the global and regional elasticmapreduce
    buckets, for the standard bootstrap actions and steps.

    Always three policies, in that order.
    """
    regional = f"{region}.{BOOTSTRAP_BUCKET}"
    pulumi.debug(f"Building cluster bootstrap policies for {regional}")
    return [
        Policy(
            CLUSTER_BOOTSTRAP_POLICY_NAME,
            render(statement(list(CLUSTER_BOOTSTRAP_ACTIONS), "*")),
        ),
        allow_read_path(BOOTSTRAP_BUCKET, partition=partition),
        allow_read_path(regional, partition=partition),
    ]


EC2_FULL_ACCESS = allow_service_full_access("ec2", "ec2-full-access")

EC2_DESCRIBE_TAGS = allow_service_specific_action("ec2:DescribeTags", "ec2-describe-tags")
