from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tiny_ioc.domain import MissingDependencyPolicy

DEFAULT_CONFIG_SOURCE = "config.Config"


class ContainerSettings(BaseSettings):
    """Container configuration, read from ``TINY_IOC_*`` environment variables.

    Attributes:
        config_source: Identifier of the configuration source class, either
            ``"pkg.module:Name"`` or ``"pkg.module.Name"``.
        missing_dependency_policy: What autowiring does when a bean is missing.

    Example:
        >>> # TINY_IOC_CONFIG_SOURCE=shop.config:AppConfig
        >>> settings = ContainerSettings()
        >>> settings.config_source
        'shop.config:AppConfig'
    """

    model_config = SettingsConfigDict(env_prefix="TINY_IOC_", extra="ignore")

    config_source: str = Field(
        default=DEFAULT_CONFIG_SOURCE,
        min_length=1,
        description="Identifier of the configuration source class.",
    )
    missing_dependency_policy: MissingDependencyPolicy = Field(
        default=MissingDependencyPolicy.PLACEHOLDER,
        description="Behavior when an autowired parameter has no bean.",
    )
