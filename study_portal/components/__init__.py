"""
Component registry for the portal
Each component pairs a blueprint (routes.py) with a view-controller (service.py).
"""
from dataclasses import dataclass

PUBLIC = 'public'
SIGNED_IN = 'user'
ADMIN = 'admin'


@dataclass(frozen=True)
class ComponentInfo:
    name: str
    service_class: type
    access: str = PUBLIC


class ComponentRegistry:
    """Registry of portal screens and who may open them"""

    def __init__(self):
        self.components = {}

    def register_component(self, name, component_class, access=PUBLIC):
        if access not in (PUBLIC, SIGNED_IN, ADMIN):
            raise ValueError(f"Unknown access level for component {name}: {access}")
        self.components[name] = ComponentInfo(name, component_class, access)

    def describe(self):
        """Registered components sorted by name, as plain dicts"""
        return [
            {'name': info.name, 'access': info.access, 'service': info.service_class.__name__}
            for info in sorted(self.components.values(), key=lambda info: info.name)
        ]


# Global registry instance
registry = ComponentRegistry()


def register_component(name, access=PUBLIC):
    """Decorator for registering components"""
    def decorator(component_class):
        registry.register_component(name, component_class, access)
        return component_class
    return decorator


__all__ = ['ADMIN', 'PUBLIC', 'SIGNED_IN', 'ComponentInfo', 'ComponentRegistry', 'registry', 'register_component']
