import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_name: str = "synthmarket"
    app_env: str = "development"
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"

    # Data
    data_dir: str = "data"
    history_filename: str = "price_history.csv"

    # Randomness (None seeds from OS entropy)
    default_seed: Optional[int] = None

    # Optional YAML with simulation defaults
    simulation_config_path: str = "config/simulation.yml"
    _simulation_defaults: Dict[str, Any] = PrivateAttr(default_factory=dict)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **data):
        super().__init__(**data)
        self._simulation_defaults = self._load_simulation_defaults()

    def _load_simulation_defaults(self) -> Dict[str, Any]:
        """Load simulation defaults from the simulation.yml file"""
        config_path = Path(self.simulation_config_path)
        if not config_path.exists():
            # Try alternative path from src directory
            config_path = Path("..") / self.simulation_config_path

        if config_path.exists():
            with open(config_path, 'r') as f:
                return yaml.safe_load(f) or {}

        # Return empty dict if no file found
        return {}

    @property
    def simulation_defaults(self) -> Dict[str, Any]:
        return dict(self._simulation_defaults)

    @property
    def history_path(self) -> Path:
        return Path(self.data_dir) / self.history_filename


# Global settings instance
settings = Settings()
