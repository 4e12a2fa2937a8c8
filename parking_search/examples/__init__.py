from .maps import EXAMPLE_MAPS, load_example

__all__ = ["EXAMPLE_MAPS", "load_example"]
