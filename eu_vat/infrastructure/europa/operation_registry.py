# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: SOAP operation registry for the checkVatService.
# ============================================================================
"""SOAP Operation Registry.

Registry of the checkVatService operations and the parameters each one
accepts, in the order the WSDL declares them.

Usage:
    registry = get_default_registry()
    config = registry.get(CHECK_VAT)
    params = config.build_params(countryCode="FR", vatNumber="123")
"""

from dataclasses import dataclass, field
from typing import Any

CHECK_VAT = "checkVat"
CHECK_VAT_APPROX = "checkVatApprox"


@dataclass(frozen=True)
class OperationConfig:
    """Configuration for a SOAP operation.

    Attributes:
        name: Operation name (also the request element name).
        params: Parameter names in schema order.
    """

    name: str
    params: tuple[str, ...] = field(default_factory=tuple)

    @property
    def response_element(self) -> str:
        """Local name of the response element."""
        return f"{self.name}Response"

    def build_params(self, **kwargs: Any) -> dict[str, Any]:
        """Build SOAP parameters from kwargs.

        Unknown keys and None values are dropped; the schema order is kept.

        Args:
            **kwargs: Operation arguments.

        Returns:
            Ordered dictionary of SOAP parameters.
        """
        return {name: kwargs[name] for name in self.params if kwargs.get(name) is not None}


class OperationRegistry:
    """Registry of SOAP operation configurations."""

    def __init__(self) -> None:
        self._operations: dict[str, OperationConfig] = {}

    def register(self, name: str, params: list[str] | None = None) -> "OperationRegistry":
        """Register a SOAP operation.

        Args:
            name: Operation name (e.g., "checkVat").
            params: Parameter names in schema order.

        Returns:
            Self for method chaining.
        """
        self._operations[name] = OperationConfig(name=name, params=tuple(params or []))
        return self

    def get(self, name: str) -> OperationConfig:
        """Get operation configuration.

        Raises:
            KeyError: If operation not registered.
        """
        if name not in self._operations:
            raise KeyError(f"Operation '{name}' not registered in registry")
        return self._operations[name]

    def has(self, name: str) -> bool:
        """Check if operation is registered."""
        return name in self._operations

    def list_operations(self) -> list[str]:
        """List all registered operation names."""
        return list(self._operations.keys())


def create_default_registry() -> OperationRegistry:
    """Create registry with the checkVatService operations."""
    registry = OperationRegistry()

    registry.register(CHECK_VAT, ["countryCode", "vatNumber"])
    # Trader matching fields (traderName, traderStreet, ...) are not sent
    registry.register(
        CHECK_VAT_APPROX,
        ["countryCode", "vatNumber", "requesterCountryCode", "requesterVatNumber"],
    )

    return registry


_default_registry: OperationRegistry | None = None


def get_default_registry() -> OperationRegistry:
    """Get the shared default registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
