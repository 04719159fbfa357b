"""
Probe registry for the fixed, ordered probe set.

Probes run in registration order. The registry maps a probe name to its
class so the runner can instantiate the whole set uniformly.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Type

if TYPE_CHECKING:
    from hostvalidate.probes.base import Probe


class ProbeRegistry:
    """Registry for probe types, kept in registration order.

    Usage:
        ProbeRegistry.register(
            name='driver',
            probe_class=DriverProbe,
            description='mx_dma kernel module and device nodes'
        )

        for probe in ProbeRegistry.create_all():
            probe.run(ledger, host)
    """

    _probes: Dict[str, Type["Probe"]] = {}
    _descriptions: Dict[str, str] = {}

    @classmethod
    def register(cls, name: str, probe_class: Type["Probe"], description: str = "") -> None:
        """Register a probe type.

        Re-registering an existing name replaces the class but keeps its
        position in the run order.

        Args:
            name: Unique name for the probe (e.g., 'driver').
            probe_class: The Probe subclass.
            description: One-line description of what the probe checks.
        """
        cls._probes[name] = probe_class
        if description:
            cls._descriptions[name] = description

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._probes.pop(name, None)
        cls._descriptions.pop(name, None)

    @classmethod
    def get_probe_class(cls, name: str) -> Type["Probe"]:
        """Get probe class by name.

        Raises:
            ValueError: If the probe is not registered.
        """
        if name not in cls._probes:
            raise ValueError(f"Unknown probe: {name}. "
                             f"Available probes: {list(cls._probes.keys())}")
        return cls._probes[name]

    @classmethod
    def get_all_names(cls) -> List[str]:
        """Registered probe names in run order."""
        return list(cls._probes.keys())

    @classmethod
    def get_description(cls, name: str) -> str:
        return cls._descriptions.get(name, "")

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._probes

    @classmethod
    def create_all(cls) -> List["Probe"]:
        """Instantiate every registered probe in run order."""
        return [probe_class() for probe_class in cls._probes.values()]

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Useful for testing."""
        cls._probes.clear()
        cls._descriptions.clear()

    @classmethod
    def get_registry_info(cls) -> Dict[str, Any]:
        return {
            name: {
                'class': probe_class.__name__,
                'title': probe_class.title,
                'description': cls._descriptions.get(name, ""),
            }
            for name, probe_class in cls._probes.items()
        }
