"""
角色 - 访问控制分组
Role - an access-control grouping identified by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Role:
    """
    命名角色及其权限集合
    A named role with the permission strings it grants.

    注册表只使用 ``name`` 作为键。
    The registry only ever reads ``name``.
    """

    name: str
    description: str = ""
    permissions: set[str] = field(default_factory=set)

    def has_permission(self, permission: str) -> bool:
        """Return True if this role explicitly grants *permission*."""
        return permission in self.permissions
