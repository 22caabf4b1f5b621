"""
Games module - Built-in scenarios.

Each scenario has its own subpackage with:
- Catalog of classes and weapons
- Initial world state
- Scripted turns
"""
