import asyncio

from swipe_saver.repositories.example import ExampleRepository, ExampleViewModel


def test_fetch_data_is_empty() -> None:
    assert asyncio.run(ExampleRepository().fetch_data()) == []


def test_view_model_shows_items() -> None:
    class ItemsRepository(ExampleRepository):
        async def fetch_data(self):
            return ["a", "b"]

    view_model = ExampleViewModel(ItemsRepository())
    asyncio.run(view_model.load_data())

    assert view_model.data == "a, b"


def test_view_model_records_errors() -> None:
    class BrokenRepository(ExampleRepository):
        async def fetch_data(self):
            raise ConnectionError("offline")

    view_model = ExampleViewModel(BrokenRepository())
    asyncio.run(view_model.load_data())

    assert view_model.is_loading is False
    assert view_model.error_message == "Failed to load data: offline"
