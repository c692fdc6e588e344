"""BaseService — foundation for formrules services.

Every service receives the frozen :class:`FormrulesSettings` at
construction time and derives its policies from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formrules.domain.types import PasswordPolicy

if TYPE_CHECKING:
    from formrules.config.settings import FormrulesSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def check_form(self, name: str, data: dict) -> ServiceResult:
                schema.validate(data, self.password_policy)
    """

    def __init__(self, settings: FormrulesSettings) -> None:
        self._settings = settings

    @property
    def password_policy(self) -> PasswordPolicy:
        """Password policy from the ``[password]`` config section."""
        return self._settings.password_policy
