from __future__ import annotations

HOST_KEY_POLICIES = ("no", "accept-new")


def render_host_config(host: str, identity_file: str, *, host_key_policy: str = "no") -> str:
    """SSH client config binding ``host`` to a single deploy key.

    ``identity_file`` is written as given, so ``~/.ssh/...`` stays relative to
    whoever runs ssh later.
    """

    if host_key_policy not in HOST_KEY_POLICIES:
        raise ValueError(f"Unsupported StrictHostKeyChecking policy: {host_key_policy}")
    return (
        f"Host {host}\n"
        f"  IdentityFile {identity_file}\n"
        f"  StrictHostKeyChecking {host_key_policy}\n"
    )


def ssh_test_command(user: str, host: str) -> str:
    return f"ssh -T {user}@{host}"
