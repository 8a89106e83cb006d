"""A tile-based role-playing game with gathering, crafting, equipment and combat."""

__version__ = "0.1.0"