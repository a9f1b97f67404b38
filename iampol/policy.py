"""
Constructors for IAM policies.

Each one takes what you want to be able to do, and hands back a Policy: a name
and a JSON document, ready to hand to IAM.
"""
import json
from typing import NamedTuple

from .utils import policy_name as name_for, bucket_of, s3_arn, statement, render

__all__ = (
    'Policy', 'allow_read_path', 'allow_write_path', 'allow_read_write_path',
    'allow_path_for_actions', 'allow_service_full_access',
    'allow_service_specific_action',
)


class Policy(NamedTuple):
    """
    An IAM policy: a name safe for IAM and the policy document as JSON.
    """
    name: str
    document: str

    @property
    def statements(self):
        """
        The decoded statements of the document.
        """
        return json.loads(self.document)["Statement"]


def allow_read_path(path, *, partition='aws'):
    """
    Allow 'GetObject' and 'ListBucket' for the given S3 path.
    """
    return Policy(
        name_for("ReadAccessTo_", path),
        allow_path_for_actions(path, ["GetObject"], partition=partition),
    )


def allow_write_path(path, *, partition='aws'):
    """
    Allow 'PutObject' and 'ListBucket' for the given S3 path.
    """
    return Policy(
        name_for("WriteAccessTo_", path),
        allow_path_for_actions(path, ["PutObject"], partition=partition),
    )


def allow_read_write_path(path, *, partition='aws'):
    """
    Allow 'PutObject', 'GetObject' and 'ListBucket' for the given S3 path.
    """
    return Policy(
        name_for("ReadWriteAccessTo_", path),
        allow_path_for_actions(path, ["PutObject", "GetObject"], partition=partition),
    )


def allow_path_for_actions(path, actions, *, partition='aws'):
    """
    Build a document allowing the given S3 actions on everything under path,
    plus 'ListBucket' on the bucket the path lives in.

    actions are bare S3 verbs ("GetObject"), the "s3:" is added here.

    The object statement always comes first, the ListBucket one second.
    """
    return render(
        statement(
            [f"s3:{action}" for action in actions],
            [s3_arn(f"{path}/*", partition)],
        ),
        statement(
            ["s3:ListBucket"],
            [s3_arn(bucket_of(path), partition)],
        ),
    )


def allow_service_full_access(service_id, policy_name):
    """
    Allow every action of a service ("ec2", "cloudwatch", ...) on everything.
    """
    return Policy(policy_name, render(statement(f"{service_id}:*", "*")))


def allow_service_specific_action(action_id, policy_name):
    """
    Allow exactly one fully-qualified action ("ec2:DescribeTags") on everything.
    """
    return Policy(policy_name, render(statement(action_id, "*")))
