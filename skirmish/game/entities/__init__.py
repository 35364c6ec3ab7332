from .unit import Unit
from .unit_templates import create_unit, parse_unit_class

__all__ = ["Unit", "create_unit", "parse_unit_class"]
