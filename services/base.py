"""Base services container for dependency injection."""

from config import Config


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a prepared directory for testing.

    Args:
        config: Application configuration object.
        directory: Optional user directory. If provided, the seed file in
                   config is not read.
    """

    def __init__(self, config: Config, directory=None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            directory: Optional Directory for dependency injection (testing).
                       If None, loads the directory from config.seed_file.
        """
        # Lazy import to avoid circular dependencies
        from services.seed import load_directory
        from services.transfers import TransferService

        self.config = config
        self.directory = directory or load_directory(config.seed_file)
        self.transfers = TransferService(self.directory)
