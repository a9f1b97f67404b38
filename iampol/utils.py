"""
String plumbing shared by every policy constructor.
"""
import json

__all__ = 'policy_name', 'bucket_of', 's3_arn', 'statement', 'render'

VERSION = "2012-10-17"


def policy_name(label, path):
    """
    Derive a policy name from a label and a path.

    IAM won't take slashes in a policy name, so they become '+'.
    """
    return f"{label}{path}".replace('/', '+')


def bucket_of(path):
    """
    The bucket part of an S3 path (everything before the first '/').
    """
    return path.partition('/')[0]


def s3_arn(resource, partition='aws'):
    return f"arn:{partition}:s3:::{resource}"


def statement(actions, resources, effect="Allow"):
    # Key order is Action, Resource, Effect. Tests snapshot the output.
    return {
        "Action": actions,
        "Resource": resources,
        "Effect": effect,
    }


def render(*statements):
    """
    Wrap the statements up in a policy document and dump it to JSON.
    """
    return json.dumps({
        "Version": VERSION,
        "Statement": list(statements),
    }, indent=2)
