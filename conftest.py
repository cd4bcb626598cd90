"""Global pytest configuration.

Loads pytest-asyncio so the downloader coroutines can be tested directly.
"""

# Configure pytest-asyncio to use function-scoped event loops by default
pytest_plugins = ["pytest_asyncio"]
