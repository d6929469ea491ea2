from typing import Optional

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.organization import Organization
from codehub.keys import account_key

from .base import BaseRepository


class OrganizationRepository(BaseRepository[Organization]):
    """Repository for Organization entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, Organization)

    def get(self, org_name: str) -> Optional[Organization]:
        return self._get(account_key(org_name))

    @returns_result
    def create(self, organization: Organization) -> Result[Organization]:
        return self._create(organization)

    @returns_result
    def update(self, organization: Organization) -> Result[Organization]:
        return self._update(organization)

    def delete(self, org_name: str) -> None:
        self._delete(account_key(org_name))
