"""Configuration management for chainconf using Pydantic Settings."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from chainconf.environment import ResolvedEnvironment


def _reveal(secret: SecretStr | None) -> str | None:
    return secret.get_secret_value() if secret is not None else None


class ToolchainSettings(BaseSettings):
    """Toolchain settings loaded from environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Signing
    private_key: SecretStr | None = Field(default=None, alias="PRIVATE_KEY")

    # RPC providers
    alchemy_api_key: SecretStr | None = Field(default=None, alias="ALCHEMY_API_KEY")
    infura_project_id: SecretStr | None = Field(default=None, alias="INFURA_PROJECT_ID")

    # Block explorers
    etherscan_api_key: SecretStr | None = Field(default=None, alias="ETHERSCAN_API_KEY")
    arbiscan_api_key: SecretStr | None = Field(default=None, alias="ARBISCAN_API_KEY")
    polygonscan_api_key: SecretStr | None = Field(default=None, alias="POLYGONSCAN_API_KEY")
    bscscan_api_key: SecretStr | None = Field(default=None, alias="BSCSCAN_API_KEY")

    # Gas reporter: presence of the variable enables it, whatever its value
    report_gas: str | None = Field(default=None, alias="REPORT_GAS")

    # Observability
    log_level: str = Field(default="INFO", alias="CHAINCONF_LOG_LEVEL")
    log_format: str = Field(default="text", alias="CHAINCONF_LOG_FORMAT")

    @property
    def report_gas_enabled(self) -> bool:
        """Whether ``REPORT_GAS`` is set at all."""
        return self.report_gas is not None

    def to_environment(self) -> ResolvedEnvironment:
        """Build the environment snapshot passed to the resolver.

        Returns
        -------
        ResolvedEnvironment
            Unwrapped secrets keyed by provider and explorer family.
        """
        providers = {
            "alchemy": _reveal(self.alchemy_api_key),
            "infura": _reveal(self.infura_project_id),
        }
        explorers = {
            "etherscan": _reveal(self.etherscan_api_key),
            "arbiscan": _reveal(self.arbiscan_api_key),
            "polygonscan": _reveal(self.polygonscan_api_key),
            "bscscan": _reveal(self.bscscan_api_key),
        }
        return ResolvedEnvironment(
            private_key=_reveal(self.private_key),
            provider_api_keys={k: v for k, v in providers.items() if v is not None},
            verification_api_keys={k: v for k, v in explorers.items() if v is not None},
            report_gas=self.report_gas_enabled,
        )
