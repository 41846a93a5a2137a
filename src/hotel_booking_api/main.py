import uvicorn

from hotel_booking_api.api.app import create_app
from hotel_booking_api.shared.config import settings
from hotel_booking_api.shared.logging import configure_logging

configure_logging(settings.log_level)

app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
