"""In-memory policy lookup for embedding applications and tests."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import InvalidPolicyError
from ..logging.config import get_logger
from ..models.policy import QuantityPolicy

logger = get_logger(__name__)


class InMemoryPolicyStore:
    """Quantity policies indexed by SKU, held in memory."""

    def __init__(self, policies: Optional[Mapping[str, QuantityPolicy]] = None):
        self._policies: dict[str, QuantityPolicy] = dict(policies or {})
        self.lookup_count = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> "InMemoryPolicyStore":
        """Build a store from {sku: {min, max, interval}} plain data."""
        policies = {}
        for sku, raw in data.items():
            try:
                policies[str(sku)] = QuantityPolicy.from_dict(dict(raw or {}))
            except InvalidPolicyError as e:
                e.context.setdefault("sku", str(sku))
                raise
        return cls(policies)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "InMemoryPolicyStore":
        """
        Load policies from a YAML document.

        Expected layout:

            policies:
              SKU-1: {min: 2, max: 10, interval: 2}
              SKU-2: {min: 1}
        """
        with open(path) as f:
            document = yaml.safe_load(f) or {}

        if not isinstance(document, dict):
            raise InvalidPolicyError(f"{path} must contain a mapping at the top level")

        store = cls.from_mapping(document.get("policies") or {})
        logger.info("Loaded quantity policies", path=str(path), count=len(store))
        return store

    def add(self, sku: str, policy: QuantityPolicy) -> None:
        self._policies[sku] = policy

    def find_policies_by_skus(self, skus: set[str]) -> dict[str, QuantityPolicy]:
        """Return stored policies for the requested SKUs."""
        self.lookup_count += 1
        return {sku: self._policies[sku] for sku in skus if sku in self._policies}

    def __len__(self) -> int:
        return len(self._policies)

    def __contains__(self, sku: object) -> bool:
        return sku in self._policies
