from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    Represents a single configuration parameter a client reads from the environment.

    Attributes:
        env_key (str): The raw key of the setting; clients prefix it with their type and engine (e.g. "BASE_URL" → "CMS_WORDPRESS_BASE_URL").
        val_type (str): The expected type of the value. Supported types are "string", "number", "bool", and "list".
        default (str | int | bool | list | None): Value used when the variable is not set. If None, the variable is required and an error is raised at client construction.
    """

    env_key: str
    val_type: str
    default: str | int | bool | list | None = None
