"""
Build IAM policy documents without writing IAM JSON by hand.
"""
from .policy import (
    Policy, allow_read_path, allow_write_path, allow_read_write_path,
    allow_path_for_actions, allow_service_full_access, allow_service_specific_action,
)
from .bundles import (
    allow_cluster_bootstrap_access, EC2_FULL_ACCESS, EC2_DESCRIBE_TAGS,
)
from .checked import (
    InvalidPolicyInput, allow_read_path_checked, allow_write_path_checked,
    allow_read_write_path_checked, allow_path_for_actions_checked,
)

__all__ = (
    'Policy', 'allow_read_path', 'allow_write_path', 'allow_read_write_path',
    'allow_path_for_actions', 'allow_service_full_access',
    'allow_service_specific_action', 'allow_cluster_bootstrap_access',
    'EC2_FULL_ACCESS', 'EC2_DESCRIBE_TAGS', 'InvalidPolicyInput',
    'allow_read_path_checked', 'allow_write_path_checked',
    'allow_read_write_path_checked', 'allow_path_for_actions_checked',
)
