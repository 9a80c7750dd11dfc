"""
Demo entry point.

Fetches users through the repository, looks one up by id, then listens to
the live user stream while two new users are published.
"""

import asyncio
from typing import Optional

from .config import Settings, get_settings
from .domain.entities import User
from .domain.exceptions import UserStreamException
from .infrastructure.fake_api_client import FakeApiService, IUserAPIClient
from .logging_config import get_logger, setup_logging
from .repositories.user_repository import UserRepository
from .services.user_stream_service import UserStreamService

logger = get_logger(__name__)


async def main(
    config: Optional[Settings] = None,
    api_service: Optional[IUserAPIClient] = None,
) -> None:
    """Run the demo flow."""
    config = config or get_settings()
    if api_service is None:
        api_service = FakeApiService(delay_seconds=config.FAKE_API_DELAY_SECONDS)
    repository = UserRepository(api_service)
    user_stream_service = UserStreamService()

    logger.info("Fetching users from API")
    try:
        users = await repository.fetch_all()
        for user in users:
            logger.info("User", user=user.render())

        logger.info("Fetching user by id", user_id=2)
        user = await repository.fetch_by_id(2)
        logger.info("User", user=user.render())
    except UserStreamException as e:
        logger.error("Repository error", error=e.message, details=e.details)

    logger.info("Listening for new users")
    user_stream_service.listen(
        lambda new_user: logger.info(
            "New user added via stream", user=new_user.render()
        )
    )

    with user_stream_service:
        user_stream_service.add_user(User(id=4, name="David", email="david@mail.com"))
        await asyncio.sleep(config.DEMO_PUBLISH_INTERVAL_SECONDS)
        user_stream_service.add_user(User(id=5, name="Eva", email="eva@mail.com"))


def run() -> None:
    """Console script entry point."""
    config = get_settings()
    setup_logging(config.LOG_LEVEL, config.LOG_JSON, config.SERVICE_NAME)
    asyncio.run(main(config))


if __name__ == "__main__":
    run()
