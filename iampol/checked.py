"""
Stricter versions of the path constructors.

The plain constructors will happily build a policy for an empty path; these
refuse to.
"""
import functools
import inspect

import pulumi

from .policy import (
    allow_read_path, allow_write_path, allow_read_write_path, allow_path_for_actions,
)

__all__ = (
    'InvalidPolicyInput', 'checked', 'allow_read_path_checked',
    'allow_write_path_checked', 'allow_read_write_path_checked',
    'allow_path_for_actions_checked',
)


class InvalidPolicyInput(ValueError):
    """
    Raised when a checked constructor is given a path or actions that would
    produce a meaningless policy.
    """


def check_path(path):
    if not path:
        raise InvalidPolicyInput("Path is empty")
    if path.startswith('/'):
        raise InvalidPolicyInput(f"Path {path!r} has no bucket")
    # Covers trailing slashes too, which would give a '//*' resource
    if '' in path.split('/'):
        raise InvalidPolicyInput(f"Path {path!r} has an empty segment")


def check_actions(actions):
    """
    Returns the actions as a list, so one-shot iterables survive being checked.
    """
    if isinstance(actions, str):
        # A bare string would get split up into characters
        raise InvalidPolicyInput(f"Actions must be a list, not {actions!r}")
    actions = list(actions)
    if not actions:
        raise InvalidPolicyInput("No actions given")
    if not all(actions):
        raise InvalidPolicyInput(f"Empty action in {actions!r}")
    return actions


def checked(func):
    """
    Validates the path (and actions, if it takes them) before calling func.

    Raises InvalidPolicyInput instead of building a bad policy.
    """
    sig = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*pargs, **kwargs):
        bound = sig.bind(*pargs, **kwargs)
        try:
            check_path(bound.arguments['path'])
            if 'actions' in bound.arguments:
                bound.arguments['actions'] = check_actions(bound.arguments['actions'])
        except InvalidPolicyInput as e:
            pulumi.warn(f"Refusing to build {func.__name__}: {e}")
            raise
        return func(*bound.args, **bound.kwargs)

    return wrapper


allow_read_path_checked = checked(allow_read_path)
allow_write_path_checked = checked(allow_write_path)
allow_read_write_path_checked = checked(allow_read_write_path)
allow_path_for_actions_checked = checked(allow_path_for_actions)
