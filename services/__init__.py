from .resource_manager import LanguageResources, ResourceManager

__all__ = ["LanguageResources", "ResourceManager"]
