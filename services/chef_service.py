"""
Chef management service for the Chefs Table application.

Thin layer over ChefRepository used by the controllers and by AuthService.
"""

from typing import List, Optional, Union

from models import Chef, Page, PageOptions, ConflictError, InvalidArgumentError
from utils import get_logger

from .chef_repository import ChefRepository

logger = get_logger(__name__)


class ChefService:
    """Look up, save, delete and search chefs."""

    def __init__(self, chef_repository: ChefRepository):
        self.chef_repository = chef_repository

    def find_chef(self, chef_id: int) -> Optional[Chef]:
        return self.chef_repository.get_by_id(chef_id)

    def find_chef_by_username(self, username: str) -> Optional[Chef]:
        return self.chef_repository.get_by_username(username)

    def save_chef(self, chef: Chef) -> Chef:
        """
        Create the chef when it has no id yet, otherwise update it.
        A username already used by another chef raises ConflictError.
        """
        if not chef.username:
            raise InvalidArgumentError("username is required")

        existing = self.chef_repository.get_by_username(chef.username)
        if existing is not None and existing.id != chef.id:
            logger.warning(f"Username already taken: {chef.username}")
            raise ConflictError(f"Username '{chef.username}' already exists")

        if chef.id == 0:
            self.chef_repository.create(chef)
            logger.info(f"Created chef {chef.id}: {chef.username}")
        else:
            self.chef_repository.update(chef)
        return chef

    def delete_chef(self, chef_id: int) -> bool:
        return self.chef_repository.delete(chef_id)

    def search_chefs(self, term: Optional[str] = None,
                     page_options: Optional[PageOptions] = None) -> Union[List[Chef], Page[Chef]]:
        """Plain list without page_options, a Page with them"""
        if page_options is None:
            return self.chef_repository.search(term)
        return self.chef_repository.search_page(term, page_options)
