"""Policy lookup collaborators."""

from .policy_store import InMemoryPolicyStore

__all__ = ["InMemoryPolicyStore"]
