import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONFIG_FILENAME = ".swiftformat.toml"


class Settings(BaseModel):
    """Runtime settings read from the [tool.swiftformat] table of .swiftformat.toml.

    These tune how the tool runs; formatting options only come from flags.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    extensions: list[str] = Field(default_factory=lambda: [".swift"])
    stdin_probe_timeout: float = Field(0.01, alias="stdin-probe-timeout", gt=0)
    stdin_timeout: float = Field(30.0, alias="stdin-timeout", gt=0)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        if config_path is None or not config_path.is_file():
            return cls()
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data.get("tool", {}).get("swiftformat", {}))
        except (OSError, tomllib.TOMLDecodeError, ValidationError):
            # Fall back to defaults if the file cannot be used
            return cls()
