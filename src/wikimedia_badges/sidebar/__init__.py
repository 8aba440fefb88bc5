from .amender import SidebarAmender
from .commons import CommonsURIGenerator

__all__ = ["SidebarAmender", "CommonsURIGenerator"]
