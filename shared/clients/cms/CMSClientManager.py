from shared.cache.TagCache import TagCache
from shared.helper.HelperConfig import HelperConfig
from shared.clients.cms.CMSClientInterface import CMSClientInterface


class CMSClientManager:
    """Manager class to instantiate the configured CMS client."""

    def __init__(self, helper_config: HelperConfig, cache: TagCache | None = None):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self.cache = cache
        self.client = self._initialize_client()

    def _get_engine_from_env(self) -> str:
        """Read the CMS engine name from env configuration.

        Returns:
            str: Capitalised engine name (e.g. "Wordpress").

        Raises:
            ValueError: If CMS_ENGINE is set but empty after stripping.
        """
        engine = self.helper_config.get_string_val("CMS_ENGINE", default="wordpress")
        if not engine:
            raise ValueError("No CMS engine specified in configuration (CMS_ENGINE).")
        return engine.strip().lower().capitalize()

    def _initialize_client(self) -> CMSClientInterface:
        """Instantiate the CMS client for the configured engine.

        Returns:
            CMSClientInterface: The instantiated client.

        Raises:
            ValueError: If the engine is unsupported or cannot be imported.
        """
        engine = self._get_engine_from_env()
        class_name = f"CMSClient{engine}"
        try:
            module = __import__(
                f"shared.clients.cms.{engine.lower()}.{class_name}",
                fromlist=[class_name],
            )
            client_class = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise ValueError("Unsupported CMS engine '%s'. Error: %s" % (engine, e))
        client = client_class(helper_config=self.helper_config, cache=self.cache)
        self.logging.debug("Instantiated CMS client for engine: %s", engine)
        return client

    def get_client(self) -> CMSClientInterface:
        """Return the instantiated CMS client."""
        return self.client
