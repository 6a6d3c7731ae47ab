import sys
import traceback

from voice_relay_bot import LOGGER
from voice_relay_bot.app_container import setup_container
from voice_relay_bot.frameworks.api.api_endpoint import APIEndpoint
from voice_relay_bot.settings import load_settings
from voice_relay_bot.utils.exceptions import ConfigurationError


def setup_and_run():
    """Load settings, build the container and serve the webhook API."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(e.render(), file=sys.stderr)
        sys.exit(1)

    LOGGER.info(f"Starting Voice Relay Bot with config: {settings.describe()}")
    container = setup_container(settings)
    container[APIEndpoint].run()


def main():
    """Run the Voice Relay Bot service."""
    try:
        setup_and_run()
    except KeyboardInterrupt:
        LOGGER.info("Application interrupted by user")
    except Exception as e:
        LOGGER.error(f"Application failed with error: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
