"""SOC2 host bootstrap.

Prepares a fresh Ubuntu server for the SOC2 configuration repositories:
- Fail-fast, strictly ordered steps
- One timestamped run log per invocation
- Deploy key and SSH config written owner-only before any clone
- Variants (plain config clone, ansible playbooks) declared in YAML manifests
"""

__all__ = []
