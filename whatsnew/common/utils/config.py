"""
Load configuration from `config.toml`.
"""

from pathlib import Path
from pydantic import BaseModel, field_validator

THIS_DIR = Path(__file__).parent.resolve()

CONFIG_FILE_PATH = THIS_DIR / "config.toml"


class Config(BaseModel):
    heading_marker: str
    list_marker: str
    emphasis_delimiter: str
    title: str
    close_label: str
    default_version: str
    transition_ms: int
    closing_opacity: float  # 0 = fully transparent while closing
    closing_scale: float

    @field_validator("heading_marker", "list_marker", "emphasis_delimiter", mode="before")
    def not_blank(cls, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Marker must contain at least one non-whitespace character.")
        return value

    @field_validator("closing_opacity", "closing_scale")
    def between_zero_and_one(cls, value: float) -> float:
        if not (0.0 <= value <= 1.0):
            raise ValueError("Value must be between 0 and 1.")
        return value

    @field_validator("transition_ms")
    def non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Transition duration cannot be negative.")
        return value


def load_config(path: Path = CONFIG_FILE_PATH) -> Config:
    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    config_data = {k.lower(): v for k, v in data.items()}
    return Config(**config_data)


config = load_config()


def get_config() -> Config:
    """Return the active configuration (honours `set_config`)."""
    return config


def set_config(new_config: Config) -> None:
    global config
    config = new_config


__all__ = ["config", "get_config", "set_config", "load_config", "Config"]

if __name__ == "__main__":
    print(config)
