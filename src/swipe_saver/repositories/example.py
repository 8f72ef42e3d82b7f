"""Example data repository and its view model."""

from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ExampleRepository:
    """Placeholder repository.

    Repositories are responsible for fetching data; this one has no backing
    source yet and always returns an empty list.
    """

    async def fetch_data(self) -> list[str]:
        return []


class ExampleViewModel:
    """State for the example screen."""

    def __init__(self, repository: ExampleRepository):
        self._repository = repository
        self.is_loading: bool = False
        self.error_message: Optional[str] = None
        self.data: str = ""

    async def load_data(self) -> None:
        """Load data from the repository, updating the loading/error state."""
        self.is_loading = True
        self.error_message = None

        try:
            items = await self._repository.fetch_data()
            self.data = ", ".join(items) if items else "Data loaded successfully!"
            logger.info(f"Example data loaded ({len(items)} items)")
        except Exception as e:
            logger.error(f"Failed to load example data: {e}")
            self.error_message = f"Failed to load data: {e}"
        finally:
            self.is_loading = False
