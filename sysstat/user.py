"""Information about user accounts and the host."""

from __future__ import annotations

import grp
import os
import pwd
import socket
from dataclasses import dataclass


class UnknownUserError(LookupError):
    """Raised when a user cannot be found."""


@dataclass(frozen=True)
class UserInfo:
    """A user account together with its primary group and the host name."""

    uid: str
    gid: str
    username: str
    group: str
    hostname: str


def _from_account(account: pwd.struct_passwd) -> UserInfo:
    try:
        group = grp.getgrgid(account.pw_gid)
    except KeyError:
        raise LookupError(f"group: unknown groupid {account.pw_gid}") from None
    return UserInfo(
        uid=str(account.pw_uid),
        gid=str(account.pw_gid),
        username=account.pw_name,
        group=group.gr_name,
        hostname=socket.gethostname(),
    )


def lookup_user(username: str) -> UserInfo:
    """Look up a user by login name; raises UnknownUserError if absent."""
    try:
        account = pwd.getpwnam(username)
    except KeyError:
        raise UnknownUserError(f"user: unknown user {username}") from None
    return _from_account(account)


def lookup_user_id(uid: str | int) -> UserInfo:
    """Look up a user by numeric id; raises UnknownUserError if absent.

    A uid that is not a decimal number raises ValueError.
    """
    number = int(uid)
    try:
        account = pwd.getpwuid(number)
    except KeyError:
        raise UnknownUserError(f"user: unknown userid {number}") from None
    return _from_account(account)


def current_user() -> UserInfo:
    """Return information about the user running this process."""
    return lookup_user_id(os.getuid())