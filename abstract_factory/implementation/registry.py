import logging

logger = logging.getLogger(__name__)


def resolve_factory(registry: dict, name: str, family: str):
    """
    Looks up a factory class by variation name and returns a new instance of it.

    Args:
        registry (dict): Mapping of variation name to factory class.
        name (str): Variation name, matched case-insensitively after trimming.
        family (str): Human-readable family name used in the error message.

    Returns:
        A new factory instance for the requested variation.

    Raises:
        ValueError: If no factory is registered for the variation.
    """
    wanted = name.strip().casefold()
    for variation, factory_cls in registry.items():
        if variation.casefold() == wanted:
            logger.debug(f"Resolved {family} variation '{name}' to {factory_cls.__name__}")
            return factory_cls()

    known = ", ".join(registry)
    raise ValueError(f"Unknown {family} variation '{name}'. Known variations: {known}")
