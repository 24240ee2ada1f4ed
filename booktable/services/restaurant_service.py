"""Restaurant catalog repository - in-memory implementation for the demo."""

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from booktable.availability import search_restaurants
from booktable.config import Config, get_config
from booktable.exceptions import CatalogUnavailableError, RestaurantNotFoundError
from booktable.models import Restaurant, SearchQuery

logger = logging.getLogger(__name__)

# Fields a manager cannot set directly
PROTECTED_FIELDS = {"id", "approved", "booked_today", "reviews", "created_at"}


class RestaurantRepository(ABC):
    """Source of restaurant data.

    fetch_catalog either returns the whole catalog or raises
    CatalogUnavailableError. Searches run the availability engine on the
    fetched snapshot.
    """

    @abstractmethod
    async def fetch_catalog(self) -> list[Restaurant]:
        """Get every restaurant, approved or not, in display order."""

    @abstractmethod
    async def add_restaurant(self, data: dict[str, Any]) -> Restaurant:
        """Register a new restaurant awaiting approval."""

    @abstractmethod
    async def update_restaurant(self, restaurant_id: str, updates: dict[str, Any]) -> Restaurant:
        """Apply changes to a restaurant and return the updated record."""

    @abstractmethod
    async def remove_restaurant(self, restaurant_id: str) -> None:
        """Delete a restaurant from the catalog."""

    async def fetch_approved(self) -> list[Restaurant]:
        """Get the restaurants visible to customers."""
        return [r for r in await self.fetch_catalog() if r.approved]

    async def list_pending(self) -> list[Restaurant]:
        """Get the restaurants waiting for admin approval."""
        return [r for r in await self.fetch_catalog() if not r.approved]

    async def list_by_manager(self, manager_id: str) -> list[Restaurant]:
        """Get the restaurants owned by a manager."""
        return [r for r in await self.fetch_catalog() if r.manager_id == manager_id]

    async def get_restaurant(self, restaurant_id: str) -> Restaurant:
        """Find a restaurant by id.

        Raises:
            RestaurantNotFoundError: If no restaurant has that id
        """
        for restaurant in await self.fetch_catalog():
            if restaurant.id == restaurant_id:
                return restaurant
        raise RestaurantNotFoundError(f"Restaurant '{restaurant_id}' not found")

    async def search(self, query: SearchQuery, grace_minutes: int | None = None) -> list[Restaurant]:
        """Fetch the catalog and filter it for a search query."""
        catalog = await self.fetch_catalog()
        if grace_minutes is None:
            return search_restaurants(catalog, query)
        return search_restaurants(catalog, query, grace_minutes=grace_minutes)

    async def approve_restaurant(self, restaurant_id: str) -> Restaurant:
        """Make a restaurant visible in search."""
        logger.info(f"Approving restaurant {restaurant_id}")
        return await self.update_restaurant(restaurant_id, {"approved": True})


class InMemoryRestaurantRepository(RestaurantRepository):
    """Restaurant repository backed by a list.

    Set ``online`` to False to make every call fail as if the catalog
    backend were unreachable.
    """

    def __init__(
        self,
        restaurants: list[Restaurant] | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            restaurants: Initial catalog contents
            config: Application config (defaults to the global config)
        """
        self.config = config or get_config()
        self._restaurants: list[Restaurant] = list(restaurants or [])
        self.online = True
        logger.info(f"Initialized restaurant repository with {len(self._restaurants)} restaurants")

    async def _round_trip(self) -> None:
        if self.config.simulated_latency_ms:
            await asyncio.sleep(self.config.simulated_latency_ms / 1000)
        if not self.online:
            logger.error("Restaurant catalog is offline")
            raise CatalogUnavailableError("Failed to fetch restaurants")

    def _index_of(self, restaurant_id: str) -> int:
        for index, restaurant in enumerate(self._restaurants):
            if restaurant.id == restaurant_id:
                return index
        raise RestaurantNotFoundError(f"Restaurant '{restaurant_id}' not found")

    async def fetch_catalog(self) -> list[Restaurant]:
        await self._round_trip()
        # Snapshot so later edits don't leak into a running search
        return list(self._restaurants)

    async def add_restaurant(self, data: dict[str, Any]) -> Restaurant:
        await self._round_trip()

        fields = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
        restaurant = Restaurant.model_validate(
            {
                **fields,
                "id": f"restaurant-{uuid.uuid4().hex[:8]}",
                "approved": False,
                "booked_today": 0,
                "reviews": [],
                "created_at": datetime.now(),
            }
        )
        self._restaurants.append(restaurant)

        logger.info(f"Added restaurant {restaurant.id} ({restaurant.name}), pending approval")
        return restaurant

    async def update_restaurant(self, restaurant_id: str, updates: dict[str, Any]) -> Restaurant:
        await self._round_trip()

        index = self._index_of(restaurant_id)
        current = self._restaurants[index]
        merged = {**current.model_dump(), **{k: v for k, v in updates.items() if k != "id"}}
        updated = Restaurant.model_validate(merged)
        self._restaurants[index] = updated

        logger.info(f"Updated restaurant {restaurant_id}: {sorted(updates)}")
        return updated

    async def remove_restaurant(self, restaurant_id: str) -> None:
        await self._round_trip()

        index = self._index_of(restaurant_id)
        removed = self._restaurants.pop(index)
        logger.info(f"Removed restaurant {restaurant_id} ({removed.name})")
